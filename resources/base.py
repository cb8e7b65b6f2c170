"""Common plumbing shared by every API resource."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from config.settings import Settings, get_settings
from protocols.http_client import HttpClient
from transport.request import Request, request


class ApiResource:
    """Base for resource classes. Falls back to the default settings."""

    def __init__(
        self,
        conf: Settings | None = None,
        client: HttpClient | None = None,
    ) -> None:
        self.conf = conf or get_settings()
        self.client = client

    def _request(self, path: str, params: dict[str, Any] | None = None) -> Request:
        return request(self.conf, path, params=params, client=self.client)


def path_segment(value: str | int) -> str:
    """Percent-encode an email or id for use inside a URL path."""
    return quote(str(value), safe="@")
