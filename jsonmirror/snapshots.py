from __future__ import annotations

import logging
import threading
import time
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)


def snapshot_name(source: Path, now_ms: int | None = None) -> str:
    """
    "data/settings.json" -> "snapshot-settings-1700000000000.json"

    The stem drops only the last extension; a source without one yields a
    snapshot without one.
    """
    ms = int(time.time() * 1000) if now_ms is None else int(now_ms)
    return f"snapshot-{source.stem}-{ms}{source.suffix}"


class SnapshotTimer:
    """
    Calls `callback` every `interval` seconds on a daemon thread until stopped.

    A failing callback is logged and the timer keeps going.
    """

    def __init__(self, interval: float, callback: Callable[[], object], *, name: str = "jsonmirror-snapshot"):
        self._interval = interval
        self._callback = callback
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._thread.is_alive() and not self._stopped.is_set()

    def start(self) -> None:
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        self._stopped.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def _run(self) -> None:
        while not self._stopped.wait(self._interval):
            try:
                self._callback()
            except Exception:
                logger.exception("Scheduled snapshot failed")
