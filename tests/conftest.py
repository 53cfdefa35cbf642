from __future__ import annotations

import json
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection,
# including import modes that don't prepend the rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def registry():
    """
    A fresh registry per test; closed afterwards so no snapshot timer outlives the test.
    """
    from jsonmirror.registry import StoreRegistry

    reg = StoreRegistry()
    yield reg
    reg.close()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "database.json"


@pytest.fixture
def write_doc():
    def _write(path: Path, doc) -> Path:
        path.write_text(json.dumps(doc), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any JSONMIRROR_* variables inherited from the developer's shell."""
    for name in (
        "JSONMIRROR_INDENTED",
        "JSONMIRROR_SNAPSHOTS_ENABLED",
        "JSONMIRROR_SNAPSHOT_PATH",
        "JSONMIRROR_SNAPSHOT_INTERVAL_MS",
    ):
        monkeypatch.delenv(name, raising=False)
