"""Plugin config file: lazy memoized load, typed accessors, save."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

PLUGINS_KEY = "plugins"
LOCAL_PLUGINS_KEY = "localPlugins"


class ConfigStore:
    """Single owner of the on-disk plugin configuration for one process.

    The file is read at most once. A failed read is remembered as "missing"
    and never retried; ``save`` replaces the cached document without re-reading.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._loaded = False
        self._document: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any] | None:
        if self._loaded:
            return self._document
        self._loaded = True
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.debug("could not read %s: %s", self.path, e)
            return None
        if not isinstance(data, dict):
            logger.debug("%s does not hold a JSON object", self.path)
            return None
        logger.debug("loaded %s", self.path)
        self._document = data
        return data

    def exists(self) -> bool:
        return self._load() is not None

    @property
    def document(self) -> dict[str, Any]:
        """The loaded document; an empty dict when the file is missing."""
        return self._load() or {}

    def _list(self, key: str) -> list[str] | None:
        value = self.document.get(key)
        return value if isinstance(value, list) else None

    def get_plugins(self) -> list[str]:
        return list(self._list(PLUGINS_KEY) or [])

    def get_local_plugins(self) -> list[str]:
        return list(self._list(LOCAL_PLUGINS_KEY) or [])

    def is_installed(self, specifier: str, locally: bool = False) -> bool:
        entries = self._list(LOCAL_PLUGINS_KEY if locally else PLUGINS_KEY)
        if entries is None:
            return False
        return specifier in entries

    def save(self, document: dict[str, Any]) -> None:
        # Plain overwrite: an interrupted write can leave a truncated file.
        self.path.write_text(
            json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
        self._document = document
        self._loaded = True
        logger.debug("saved %s", self.path)
