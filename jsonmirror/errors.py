"""Exceptions raised by jsonmirror."""

from __future__ import annotations


class StoreError(Exception):
    """Base exception for all store errors."""


class InvalidArgument(StoreError, ValueError):
    """A file path, snapshot path, interval or options object was rejected."""


class FormatError(StoreError, ValueError):
    """The backing file does not decode to a JSON object."""

    def __init__(self, path: object, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
