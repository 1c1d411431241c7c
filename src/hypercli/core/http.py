"""Minimal JSON-over-HTTP GET helper."""

from __future__ import annotations

import json
import logging
import time
import urllib.error
import urllib.request
from typing import Any

from hypercli import __version__

logger = logging.getLogger(__name__)

USER_AGENT = f"hyper-cli/{__version__}"
CHUNK_SIZE = 64 * 1024


class HTTPStatusError(Exception):
    """Non-2xx response."""

    def __init__(self, url: str, status: int, reason: str = "") -> None:
        super().__init__(f"HTTP {status} {reason}".strip() + f" for {url}")
        self.url = url
        self.status = status
        self.reason = reason


def _read_body(resp, url: str, deadline: float | None) -> bytes:
    chunks = []
    while chunk := resp.read(CHUNK_SIZE):
        chunks.append(chunk)
        if deadline is not None and time.monotonic() > deadline:
            raise TimeoutError(f"reading {url} took longer than allowed")
    return b"".join(chunks)


def get_json(url: str, timeout: float | None = None, accept: str = "application/json") -> Any:
    """GET *url* and return the decoded JSON body.

    *timeout* bounds the whole request, body included, not just each socket
    operation. Raises HTTPStatusError for non-2xx responses, URLError or
    TimeoutError for transport failures and json.JSONDecodeError for
    non-JSON bodies.
    """
    req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT, "Accept": accept})
    deadline = time.monotonic() + timeout if timeout is not None else None
    logger.debug("GET %s (timeout=%s)", url, timeout)
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            raw = _read_body(resp, url, deadline)
    except urllib.error.HTTPError as e:
        logger.debug("GET %s -> %s", url, e.code)
        raise HTTPStatusError(url, e.code, str(e.reason)) from e
    return json.loads(raw.decode("utf-8", errors="replace"))
