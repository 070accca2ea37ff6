"""Storage driver selection from settings."""

from __future__ import annotations

import logging
from pathlib import Path

from avatarforge.storage.base import StorageStrategy
from avatarforge.storage.local import LocalStorage
from avatarforge.storage.memory import InMemoryStorage

logger = logging.getLogger(__name__)


def create_storage(driver: str, path: Path | str) -> StorageStrategy:
    """Build the configured driver: ``local`` or ``memory``."""
    name = driver.strip().lower()
    if name == "local":
        logger.info("Using local storage at %s", path)
        return LocalStorage(path)
    if name == "memory":
        logger.info("Using in-memory storage")
        return InMemoryStorage()
    raise ValueError(f"Unknown storage driver: {driver}")
