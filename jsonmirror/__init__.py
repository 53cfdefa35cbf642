"""
File-backed key-value store that keeps an in-memory mirror of one JSON object.

    from jsonmirror import create_registry

    registry = create_registry()
    db = registry.acquire("data/settings.json")
    db.set("theme", "dark")            # written to disk immediately
    for i in range(1000):
        db.set_local(f"row{i}", i)     # mirror only
    db.save()                          # one write for the whole batch
"""

from __future__ import annotations

from .app import create_registry
from .errors import FormatError, InvalidArgument, StoreError
from .interfaces import KeyValueStore
from .options import SnapshotOptions, StoreOptions
from .registry import StoreRegistry
from .repositories import AsyncJsonStore
from .settings import Settings, get_settings
from .store import JsonStore

__all__ = [
    "create_registry",
    "StoreRegistry",
    "JsonStore",
    "AsyncJsonStore",
    "KeyValueStore",
    "StoreOptions",
    "SnapshotOptions",
    "Settings",
    "get_settings",
    "StoreError",
    "InvalidArgument",
    "FormatError",
]

__version__ = "0.1.0"
