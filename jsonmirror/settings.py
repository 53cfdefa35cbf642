from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import InvalidArgument
from .options import StoreOptions

ONE_DAY_MS = 86_400_000


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise InvalidArgument(f"{name} must be a number, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    # Formatting
    indented: bool

    # Periodic snapshots (off unless explicitly enabled)
    snapshots_enabled: bool
    snapshot_path: str
    snapshot_interval_ms: float

    def default_options(self) -> StoreOptions:
        return StoreOptions.coerce(
            {
                "indented": self.indented,
                "snapshots": {
                    "enabled": self.snapshots_enabled,
                    "path": self.snapshot_path,
                    "interval": self.snapshot_interval_ms,
                },
            }
        )


def get_settings() -> Settings:
    return Settings(
        indented=_env_bool("JSONMIRROR_INDENTED", False),
        snapshots_enabled=_env_bool("JSONMIRROR_SNAPSHOTS_ENABLED", False),
        snapshot_path=os.getenv("JSONMIRROR_SNAPSHOT_PATH", "./backups/"),
        snapshot_interval_ms=_env_float("JSONMIRROR_SNAPSHOT_INTERVAL_MS", ONE_DAY_MS),
    )
