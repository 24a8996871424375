"""Mini README: Abstract key-value store used to persist ledger state.

Structure:
    * KeyValueStore - abstract get/set interface over string values.
    * InMemoryStore - dictionary-backed store for tests and ephemeral runs.

The interface mirrors browser local storage: values are opaque strings, a
missing key reads as ``None`` and every write replaces the previous value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class KeyValueStore(ABC):
    """Base interface for persistence backends."""

    backend_name: str = "generic"

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored string for ``key`` or ``None`` when absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, overwriting any previous value."""


class InMemoryStore(KeyValueStore):
    """Keep values in a process-local dictionary."""

    backend_name = "memory"

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})
        LOGGER.debug("In-memory store created with keys: %s", sorted(self._values))

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
