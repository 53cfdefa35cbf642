from __future__ import annotations

import os
from pathlib import Path

from .errors import InvalidArgument


def canonical_path(path: str | os.PathLike[str], *, what: str = "file path") -> Path:
    """Validate a user supplied path and return it absolute and resolved."""
    if isinstance(path, bytes) or not isinstance(path, (str, os.PathLike)):
        raise InvalidArgument(f"Provide a valid {what}, got {type(path).__name__}")
    raw = os.fspath(path)
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidArgument(f"Provide a valid {what}, got an empty path")
    return Path(raw).expanduser().resolve()


def ensure_dir(path: Path) -> Path:
    # One level only: a missing parent raises FileNotFoundError.
    path.mkdir(exist_ok=True)
    return path
