from __future__ import annotations

import os

import pytest

from jsonmirror import InvalidArgument, create_registry, get_settings
from jsonmirror.settings import ONE_DAY_MS


def test_settings_defaults(clean_env):
    settings = get_settings()

    assert settings.indented is False
    assert settings.snapshots_enabled is False
    assert settings.snapshot_path == "./backups/"
    assert settings.snapshot_interval_ms == ONE_DAY_MS
    assert settings.default_options().snapshots_enabled is False


def test_settings_from_environment(clean_env, monkeypatch, tmp_path):
    monkeypatch.setenv("JSONMIRROR_INDENTED", "yes")
    monkeypatch.setenv("JSONMIRROR_SNAPSHOTS_ENABLED", "1")
    monkeypatch.setenv("JSONMIRROR_SNAPSHOT_PATH", str(tmp_path / "snaps"))
    monkeypatch.setenv("JSONMIRROR_SNAPSHOT_INTERVAL_MS", "60000")

    opts = get_settings().default_options()

    assert opts.indented is True
    assert opts.snapshots_enabled
    assert opts.snapshots.path == str(tmp_path / "snaps")
    assert opts.snapshots.interval == 60000


def test_enabled_snapshots_without_path_are_rejected(clean_env, monkeypatch):
    monkeypatch.setenv("JSONMIRROR_SNAPSHOTS_ENABLED", "true")
    monkeypatch.setenv("JSONMIRROR_SNAPSHOT_PATH", "")

    with pytest.raises(InvalidArgument):
        get_settings().default_options()


def test_create_registry_reads_env_file(clean_env, tmp_path):
    env_file = tmp_path / "local.env"
    env_file.write_text("JSONMIRROR_INDENTED=true\n", encoding="utf-8")

    registry = create_registry(str(env_file))
    try:
        db = registry.acquire(tmp_path / "db.json")
        db.set("a", 1)
    finally:
        registry.close()
        # load_dotenv writes straight into os.environ
        os.environ.pop("JSONMIRROR_INDENTED", None)

    assert registry.default_options.indented is True
    assert (tmp_path / "db.json").read_text(encoding="utf-8") == '{\n  "a": 1\n}'


def test_create_registry_without_env_file(clean_env, tmp_path):
    with create_registry(None) as registry:
        db = registry.acquire(tmp_path / "db.json")
        assert registry.acquire(tmp_path / "db.json") is db
        assert db.options.indented is False


def test_non_numeric_interval_in_environment(clean_env, monkeypatch):
    monkeypatch.setenv("JSONMIRROR_SNAPSHOT_INTERVAL_MS", "abc")

    with pytest.raises(InvalidArgument, match="JSONMIRROR_SNAPSHOT_INTERVAL_MS"):
        get_settings()


def test_nan_interval_in_environment(clean_env, monkeypatch, tmp_path):
    monkeypatch.setenv("JSONMIRROR_SNAPSHOTS_ENABLED", "1")
    monkeypatch.setenv("JSONMIRROR_SNAPSHOT_PATH", str(tmp_path / "snaps"))
    monkeypatch.setenv("JSONMIRROR_SNAPSHOT_INTERVAL_MS", "nan")

    with pytest.raises(InvalidArgument):
        get_settings().default_options()
