"""Search the npm index for Hyper plugins and themes."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any
from urllib.parse import quote

from hypercli.core.http import HTTPStatusError, get_json

from .errors import SearchError
from .models import SearchResultEntry

logger = logging.getLogger(__name__)

SEARCH_KEYWORDS = "keywords:hyper-plugin,hyper-theme"
SEARCH_SIZE = 250  # single page; anything past this is dropped


class SearchService:
    def __init__(self, search_api_base: str, fetch: Callable[..., Any] | None = None) -> None:
        self.search_api_base = search_api_base
        self._fetch = fetch or get_json

    def url_for(self, pattern: str = "") -> str:
        query = f"{quote(pattern)}+{SEARCH_KEYWORDS}" if pattern else SEARCH_KEYWORDS
        return f"{self.search_api_base}?q={query}&size={SEARCH_SIZE}"

    def search(self, pattern: str = "") -> list[SearchResultEntry]:
        url = self.url_for(pattern)
        logger.debug("searching %s", url)
        try:
            body = self._fetch(url)
            results = body["results"]
            entries = []
            for result in results:
                package = result["package"]
                entries.append(
                    SearchResultEntry(
                        name=package["name"],
                        description=package.get("description") or "",
                    )
                )
        except (
            HTTPStatusError,
            OSError,
            json.JSONDecodeError,
            UnicodeDecodeError,
            KeyError,
            TypeError,
            AttributeError,
        ) as e:
            raise SearchError(f"Search failed: {e}", cause=e) from e
        return entries

    def list_remote(self) -> list[SearchResultEntry]:
        return self.search("")
