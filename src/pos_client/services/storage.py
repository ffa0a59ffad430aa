"""Local key/value persistence: JSON values kept in a single JSON file.

Used opportunistically (UI preferences, drafts); the backend stays the
source of truth for every collection.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from pos_client.config.constants import STORAGE_FILE

logger = logging.getLogger(__name__)


class LocalStore:
    """get/set/remove over a JSON file. A missing or unreadable file is an empty store."""

    def __init__(self, path: str = STORAGE_FILE) -> None:
        self.path = str(path)

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable local store %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: Dict[str, Any]) -> None:
        """Write the whole store. Raises on I/O error."""
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=4, ensure_ascii=False)

    def get(self, key: str) -> Optional[Any]:
        """Return the stored value for key, or None if absent."""
        return self._load().get(key)

    def set(self, key: str, value: Any) -> None:
        """Store value under key. Raises TypeError if value is not JSON-serializable."""
        data = self._load()
        data[key] = json.loads(json.dumps(value))
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)
