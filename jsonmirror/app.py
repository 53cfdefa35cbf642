from __future__ import annotations

import logging

from dotenv import load_dotenv

from .registry import StoreRegistry
from .settings import get_settings

logger = logging.getLogger(__name__)


def create_registry(env_file: str | None = "local.env") -> StoreRegistry:
    """
    Composition root: read settings (optionally from an env file) and build
    the registry that owns every store for the lifetime of the application.

    Call `close()` on the result at shutdown to stop snapshot timers.
    """
    if env_file:
        load_dotenv(env_file)

    settings = get_settings()
    registry = StoreRegistry(settings.default_options())
    logger.debug("Created store registry (indented=%s, snapshots=%s)", settings.indented, settings.snapshots_enabled)
    return registry
