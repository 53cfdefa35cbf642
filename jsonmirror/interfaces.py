from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """
    Public surface of a file-backed key-value store: a mirror of one JSON
    object, with immediate and deferred ("local") mutations.
    """

    def load(self) -> None:
        """Replace the mirror with the file's contents."""
        ...

    def save(self) -> None:
        """Write the mirror to the file."""
        ...

    def snapshot(self, directory: str) -> Path:
        ...

    def get(self, key: str, default: Any = None) -> Any: ...
    def set(self, key: str, value: Any) -> None: ...
    def set_local(self, key: str, value: Any) -> None: ...

    def update(self, key: str, fn: Callable[[Any], Any]) -> Any: ...
    def update_local(self, key: str, fn: Callable[[Any], Any]) -> Any: ...

    def delete(self, key: str) -> None: ...
    def delete_local(self, key: str) -> None: ...
    def delete_all(self) -> None: ...
    def delete_all_local(self) -> None: ...

    def has(self, key: str) -> bool: ...
    def array(self, mode: str | None = None) -> list[Any]: ...
