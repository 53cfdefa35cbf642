from __future__ import annotations

import math
import os
import threading
from datetime import timedelta
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import InvalidArgument

# Longest wait threading.Event.wait accepts.
MAX_INTERVAL_MS = threading.TIMEOUT_MAX * 1000


class SnapshotOptions(BaseModel):
    """
    Periodic snapshot policy:
      { "enabled": true, "path": "./backups/", "interval": 86400000 }

    `interval` is in milliseconds; a timedelta is accepted and converted.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    enabled: bool = False
    path: str | None = None
    interval: float | None = None

    @field_validator("path", mode="before")
    @classmethod
    def _coerce_path(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value

    @field_validator("interval", mode="before")
    @classmethod
    def _coerce_interval(cls, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, timedelta):
            return value.total_seconds() * 1000
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("interval must be a number of milliseconds")
        try:
            ms = float(value)
        except OverflowError as exc:
            raise ValueError("interval is too large") from exc
        if not math.isfinite(ms):
            raise ValueError("interval must be a finite number of milliseconds")
        return ms

    @model_validator(mode="after")
    def _check_enabled(self) -> "SnapshotOptions":
        if not self.enabled:
            return self
        if not self.path or not self.path.strip():
            raise ValueError("Provide a valid file path for database snapshots")
        if self.interval is None:
            raise ValueError("Provide the interval in milliseconds for snapshot creation")
        if self.interval <= 0:
            raise ValueError("Snapshot interval must be positive")
        if self.interval > MAX_INTERVAL_MS:
            raise ValueError(f"Snapshot interval must not exceed {MAX_INTERVAL_MS:.0f}ms")
        return self

    @property
    def interval_seconds(self) -> float:
        return (self.interval or 0) / 1000


class StoreOptions(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    snapshots: SnapshotOptions | None = None
    force_new: bool = Field(default=False, alias="forceNew")
    indented: bool = False

    @classmethod
    def coerce(cls, options: "StoreOptions | Mapping[str, Any] | None") -> "StoreOptions":
        """Accept a StoreOptions, a plain mapping or None; raise InvalidArgument otherwise."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise InvalidArgument(f"options must be a mapping, got {type(options).__name__}")
        try:
            return cls.model_validate(dict(options))
        except ValidationError as exc:
            raise InvalidArgument(_first_error(exc)) from exc

    @property
    def snapshots_enabled(self) -> bool:
        return self.snapshots is not None and self.snapshots.enabled


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    err = errors[0]
    where = ".".join(str(p) for p in err.get("loc", ()))
    msg = str(err.get("msg", "invalid value")).removeprefix("Value error, ")
    return f"{where}: {msg}" if where else msg
