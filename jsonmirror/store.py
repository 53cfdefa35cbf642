from __future__ import annotations

import json
import logging
import os
import shutil
import threading
from pathlib import Path
from typing import Any, Callable, Iterator, Literal, Mapping

from .errors import FormatError
from .json_store import read_json, write_json
from .options import StoreOptions
from .paths import canonical_path, ensure_dir
from .snapshots import SnapshotTimer, snapshot_name

logger = logging.getLogger(__name__)

ArrayMode = Literal["keys", "values"] | None


class JsonStore:
    """
    Keeps an in-memory mirror of a single JSON object stored on disk.

    - `set`, `update`, `delete` and `delete_all` write the whole file on every call.
    - The `*_local` variants only touch the mirror; call `save()` afterwards.
      Use them for bulk changes.
    - `load()` resyncs from disk and discards unsaved local changes.

    Prefer `StoreRegistry.acquire()` over constructing this directly so that
    every caller using the same file shares one mirror.
    """

    def __init__(self, path: str | os.PathLike[str], options: StoreOptions | Mapping[str, Any] | None = None):
        self._path = canonical_path(path)
        self._options = StoreOptions.coerce(options)
        self._data: dict[str, Any] = {}
        self._file_lock = threading.Lock()
        self._timer: SnapshotTimer | None = None
        self._snapshot_dir: Path | None = None

        snapshots = self._options.snapshots
        if snapshots is not None and snapshots.enabled:
            self._snapshot_dir = ensure_dir(canonical_path(snapshots.path, what="snapshot path"))

        if not self._path.exists():
            ensure_dir(self._path.parent)
            self.save()
            logger.info("Created empty store file %s", self._path)
        else:
            self.load()

        if snapshots is not None and snapshots.enabled:
            self.start_snapshots()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def options(self) -> StoreOptions:
        return self._options

    @property
    def data(self) -> dict[str, Any]:
        """The live mirror. Mutating it directly behaves like the *_local operations."""
        return self._data

    # File synchronization

    def load(self) -> None:
        with self._file_lock:
            try:
                doc = read_json(self._path)
            except json.JSONDecodeError as exc:
                raise FormatError(self._path, f"invalid JSON ({exc.msg})") from exc
            except UnicodeDecodeError as exc:
                raise FormatError(self._path, "not valid UTF-8") from exc
        if not isinstance(doc, dict):
            raise FormatError(self._path, f"expected a JSON object, got {type(doc).__name__}")
        self._data = doc
        logger.debug("Loaded %d keys from %s", len(doc), self._path)

    def save(self) -> None:
        with self._file_lock:
            write_json(self._path, self._data, indented=self._options.indented)
        logger.debug("Saved %d keys to %s", len(self._data), self._path)

    def snapshot(self, directory: str | os.PathLike[str]) -> Path:
        """Copy the backing file's current bytes into a new timestamped file under `directory`."""
        target_dir = ensure_dir(canonical_path(directory, what="snapshot directory"))
        target = target_dir / snapshot_name(self._path)
        with self._file_lock:
            shutil.copyfile(self._path, target)
        logger.info("Wrote snapshot %s", target)
        return target

    def start_snapshots(self) -> None:
        """Start the periodic snapshot timer configured in the options (no-op if running)."""
        snapshots = self._options.snapshots
        if snapshots is None or not snapshots.enabled or self._snapshot_dir is None:
            return
        if self._timer is not None and self._timer.running:
            return
        directory = self._snapshot_dir
        self._timer = SnapshotTimer(
            snapshots.interval_seconds,
            lambda: self.snapshot(directory),
            name=f"jsonmirror-snapshot-{self._path.name}",
        )
        self._timer.start()
        logger.info("Snapshots of %s every %sms into %s", self._path, snapshots.interval, directory)

    def stop_snapshots(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    @property
    def snapshots_running(self) -> bool:
        return self._timer is not None and self._timer.running

    def close(self) -> None:
        """Stop background work. The mirror and file are left as they are."""
        self.stop_snapshots()

    # Key operations

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self.save()

    def set_local(self, key: str, value: Any) -> None:
        self._data[key] = value

    def update(self, key: str, fn: Callable[[Any], Any]) -> Any:
        """
        Replace the value of `key` with `fn(current)` and save.

        `current` is None when the key is absent. `fn` should be a pure,
        synchronous transform. Returns the new value.
        """
        value = fn(self._data.get(key))
        self.set(key, value)
        return value

    def update_local(self, key: str, fn: Callable[[Any], Any]) -> Any:
        value = fn(self._data.get(key))
        self.set_local(key, value)
        return value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
        self.save()

    def delete_local(self, key: str) -> None:
        self._data.pop(key, None)

    def delete_all(self) -> None:
        self._data = {}
        self.save()

    def delete_all_local(self) -> None:
        self._data = {}

    def has(self, key: str) -> bool:
        return key in self._data

    def array(self, mode: ArrayMode | str = None) -> list[Any]:
        """
        Materialize the mirror in insertion order:
          "keys"   -> ["a", "b"]
          "values" -> [1, 2]
          other    -> [{"key": "a", "value": 1}, {"key": "b", "value": 2}]
        """
        if mode == "keys":
            return list(self._data.keys())
        if mode == "values":
            return list(self._data.values())
        return [{"key": k, "value": v} for k, v in self._data.items()]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __repr__(self) -> str:
        return f"JsonStore({str(self._path)!r}, keys={len(self._data)})"
