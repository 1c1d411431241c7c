"""npm registry lookups: does a plugin's package exist?"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from hypercli.core.http import HTTPStatusError, get_json

from .errors import NetworkError, NotFoundError, PluginError
from .models import RegistryEntry, Result, registry_path

logger = logging.getLogger(__name__)

REGISTRY_TIMEOUT = 10  # seconds, whole request
# abbreviated metadata: a fraction of the full document, still carries versions
REGISTRY_ACCEPT = "application/vnd.npm.install-v1+json; q=1.0, application/json; q=0.8"

Fetcher = Callable[..., Any]


class RegistryClient:
    def __init__(self, registry_url: str, fetch: Fetcher | None = None) -> None:
        self.registry_url = registry_url if registry_url.endswith("/") else registry_url + "/"
        self._fetch = fetch or get_json

    def url_for(self, specifier: str) -> str:
        return self.registry_url + registry_path(specifier)

    def exists_on_registry(self, specifier: str) -> Result[RegistryEntry, PluginError]:
        """Look the package up once; no retry.

        A body without a non-empty ``versions`` object (a 404 included)
        is NotFoundError; every other failure is NetworkError.
        """
        url = self.url_for(specifier)
        try:
            body = self._fetch(url, timeout=REGISTRY_TIMEOUT, accept=REGISTRY_ACCEPT)
        except HTTPStatusError as e:
            if e.status == 404:
                logger.debug("%s: 404 from registry", specifier)
                return Result.failure(NotFoundError(f"{specifier} not found on npm"))
            return Result.failure(NetworkError(str(e), cause=e))
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            # URLError, socket timeouts and refused connections are OSErrors
            logger.debug("%s: registry lookup failed: %s", specifier, e)
            return Result.failure(NetworkError(str(e), cause=e))

        versions = body.get("versions") if isinstance(body, dict) else None
        if not (isinstance(versions, dict) and versions):
            logger.debug("%s: registry response has no versions", specifier)
            return Result.failure(NotFoundError(f"{specifier} not found on npm"))
        return Result.success(body)
