"""Mini README: Persistence backends for ledger state.

Exports the ``KeyValueStore`` interface, its in-memory and JSON-file
implementations, and ``create_store`` which picks one from settings.
"""

from __future__ import annotations

from typing import Optional

from ..configuration import LedgerSettings, get_settings
from ..logging_utils import get_logger
from .base import InMemoryStore, KeyValueStore
from .json_store import JsonFileStore

LOGGER = get_logger(__name__)


def create_store(settings: Optional[LedgerSettings] = None) -> KeyValueStore:
    """Instantiate the backend named by ``settings.storage_backend``."""

    settings = settings or get_settings()
    if settings.storage_backend == "memory":
        LOGGER.info("Using in-memory store; state will not survive restarts")
        return InMemoryStore()
    LOGGER.info("Using JSON store at %s", settings.store_path)
    return JsonFileStore(settings.store_path)


__all__ = ["InMemoryStore", "JsonFileStore", "KeyValueStore", "create_store"]
