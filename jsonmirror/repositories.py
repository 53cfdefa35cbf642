from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Any, Callable

from .interfaces import KeyValueStore


class AsyncJsonStore:
    """
    Async wrapper around a JsonStore (or anything shaped like one).
    Uses asyncio.to_thread for every call that touches the file so the event
    loop is never blocked on disk I/O; mirror-only calls run inline.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @property
    def store(self) -> KeyValueStore:
        return self._store

    async def load(self) -> None:
        await asyncio.to_thread(self._store.load)

    async def save(self) -> None:
        await asyncio.to_thread(self._store.save)

    async def snapshot(self, directory: str | os.PathLike[str]) -> Path:
        return await asyncio.to_thread(self._store.snapshot, directory)

    async def get(self, key: str, default: Any = None) -> Any:
        return self._store.get(key, default)

    async def set(self, key: str, value: Any) -> None:
        await asyncio.to_thread(self._store.set, key, value)

    async def set_local(self, key: str, value: Any) -> None:
        self._store.set_local(key, value)

    async def update(self, key: str, fn: Callable[[Any], Any]) -> Any:
        return await asyncio.to_thread(self._store.update, key, fn)

    async def update_local(self, key: str, fn: Callable[[Any], Any]) -> Any:
        return self._store.update_local(key, fn)

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._store.delete, key)

    async def delete_local(self, key: str) -> None:
        self._store.delete_local(key)

    async def delete_all(self) -> None:
        await asyncio.to_thread(self._store.delete_all)

    async def delete_all_local(self) -> None:
        self._store.delete_all_local()

    async def has(self, key: str) -> bool:
        return self._store.has(key)

    async def array(self, mode: str | None = None) -> list[Any]:
        return self._store.array(mode)
