"""Shared request plumbing: URL, auth header, JSON body, response wrapping."""

from __future__ import annotations

import time
from typing import Any

import httpx

from config.settings import Settings
from observability.logger import get_logger, redact_headers
from protocols.http_client import HttpClient
from schemas.response import Response

log = get_logger(__name__)

DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class Request:
    """One outbound call against ``settings.base_uri + path``.

    Non-2xx replies are returned as a ``Response`` like any other; only
    transport failures raise, and those propagate as httpx reports them.
    """

    def __init__(
        self,
        settings: Settings,
        path: str,
        params: dict[str, Any] | None = None,
        client: HttpClient | None = None,
    ) -> None:
        self.settings = settings
        self.path = path if path.startswith("/") else f"/{path}"
        self.params = {k: v for k, v in (params or {}).items() if v is not None}
        self.client = client

    @property
    def url(self) -> str:
        return self.settings.url_for(self.path)

    @property
    def headers(self) -> dict[str, str]:
        return {**DEFAULT_HEADERS, "Api-Key": self.settings.token}

    def get(self) -> Response:
        return self._send("GET")

    def post(self, body: Any = None) -> Response:
        return self._send("POST", body)

    def put(self, body: Any = None) -> Response:
        return self._send("PUT", body)

    def patch(self, body: Any = None) -> Response:
        return self._send("PATCH", body)

    def delete(self) -> Response:
        return self._send("DELETE")

    def _send(self, method: str, body: Any = None) -> Response:
        log.debug(
            "iterable.request.start",
            method=method,
            path=self.path,
            params=self.params,
            headers=redact_headers(self.headers),
        )
        start = time.perf_counter()
        try:
            if self.client is not None:
                resp = self._dispatch(self.client, method, body)
            else:
                with httpx.Client() as client:
                    resp = self._dispatch(client, method, body)
        except httpx.HTTPError as e:
            log.error("iterable.request.failed", method=method, path=self.path, error=str(e))
            raise

        latency_ms = (time.perf_counter() - start) * 1000
        log.info(
            "iterable.request.completed",
            method=method,
            path=self.path,
            status=resp.status_code,
            latency_ms=round(latency_ms, 2),
        )
        return Response.from_httpx(resp, url=self.url)

    def _dispatch(self, client: HttpClient, method: str, body: Any) -> httpx.Response:
        return client.request(
            method,
            self.url,
            params=self.params or None,
            json=body,
            headers=self.headers,
        )


def request(
    settings: Settings,
    path: str,
    params: dict[str, Any] | None = None,
    client: HttpClient | None = None,
) -> Request:
    return Request(settings, path, params=params, client=client)
