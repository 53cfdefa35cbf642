from __future__ import annotations

import logging
import os
import threading
from typing import Any, Mapping

from .options import StoreOptions
from .paths import canonical_path
from .store import JsonStore

logger = logging.getLogger(__name__)


class StoreRegistry:
    """
    Hands out one JsonStore per resolved file path so that every caller
    working on the same file shares a single mirror.

    Entries are kept until `close()`. The options given on the first
    `acquire()` for a path stay in force; later options are ignored unless
    they ask for `force_new`, which returns a private store that `get()` and
    later `acquire()` calls never see. Private stores are still stopped by
    `close()`.
    """

    def __init__(self, default_options: StoreOptions | Mapping[str, Any] | None = None) -> None:
        self._guard = threading.Lock()
        self._stores: dict[str, JsonStore] = {}
        self._private: list[JsonStore] = []
        self._default_options = StoreOptions.coerce(default_options)

    @property
    def default_options(self) -> StoreOptions:
        return self._default_options

    def acquire(
        self,
        path: str | os.PathLike[str],
        options: StoreOptions | Mapping[str, Any] | None = None,
    ) -> JsonStore:
        key = str(canonical_path(path))
        opts = self._default_options if options is None else StoreOptions.coerce(options)

        if opts.force_new:
            logger.debug("Creating unshared store for %s", key)
            private = JsonStore(key, opts)
            with self._guard:
                self._private.append(private)
            return private

        with self._guard:
            store = self._stores.get(key)
            if store is not None:
                if options is not None and opts != store.options:
                    logger.warning(
                        "Store for %s already exists; ignoring the options passed to acquire()", key
                    )
                return store
            store = JsonStore(key, opts)
            self._stores[key] = store
            logger.info("Opened store %s", key)
            return store

    def get(self, path: str | os.PathLike[str]) -> JsonStore | None:
        key = str(canonical_path(path))
        with self._guard:
            return self._stores.get(key)

    def paths(self) -> list[str]:
        with self._guard:
            return list(self._stores)

    def close(self) -> None:
        """Stop every store's background work and forget all entries."""
        with self._guard:
            stores = list(self._stores.values()) + self._private
            self._stores.clear()
            self._private = []
        for store in stores:
            store.close()

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, os.PathLike)):
            return False
        return self.get(path) is not None

    def __len__(self) -> int:
        with self._guard:
            return len(self._stores)

    def __enter__(self) -> "StoreRegistry":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
