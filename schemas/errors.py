"""Error raised when a caller opts into status checking."""

from __future__ import annotations

from typing import Any


class ApiError(Exception):
    """Non-2xx reply from the Iterable API."""

    def __init__(self, status_code: int, body: Any = None, url: str = "") -> None:
        self.status_code = status_code
        self.body = body
        self.url = url
        super().__init__(f"Iterable API returned {status_code} for {url or 'request'}")
