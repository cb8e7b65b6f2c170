"""/channels and /messageTypes endpoints."""

from __future__ import annotations

from resources.base import ApiResource
from schemas.response import Response


class Channels(ApiResource):
    def all(self) -> Response:
        return self._request("/channels").get()


class MessageTypes(ApiResource):
    def all(self) -> Response:
        return self._request("/messageTypes").get()
