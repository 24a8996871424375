"""Mini README: File-backed key-value store using a single JSON document.

Structure:
    * JsonFileStore - persists string values keyed by name in one JSON file.

Every ``set`` rewrites the whole document through a temporary file that is
then moved into place, so a reader never sees a half-written file. A missing
or unreadable file behaves like an empty store.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from ..logging_utils import get_logger
from .base import KeyValueStore

LOGGER = get_logger(__name__)


class JsonFileStore(KeyValueStore):
    """Store string values in a JSON object on disk."""

    backend_name = "json"

    def __init__(self, path: Path) -> None:
        self.path = Path(path).expanduser()
        LOGGER.debug("JSON store bound to %s", self.path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as error:
            LOGGER.warning("Ignoring unreadable store %s: %s", self.path, error)
            return {}
        if not isinstance(document, dict):
            LOGGER.warning("Ignoring store %s: top-level value is not an object", self.path)
            return {}
        return {str(key): value for key, value in document.items() if isinstance(value, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        document = self._read_all()
        document[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        descriptor, temp_name = tempfile.mkstemp(
            dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(descriptor, "w", encoding="utf-8") as handle:
                json.dump(document, handle, ensure_ascii=False, indent=2)
            os.replace(temp_name, self.path)
        except OSError:
            if os.path.exists(temp_name):
                os.unlink(temp_name)
            raise
        LOGGER.debug("Wrote key '%s' to %s", key, self.path)
