"""/events endpoints."""

from __future__ import annotations

from typing import Any

from resources.base import ApiResource, path_segment
from schemas.response import Response


class Events(ApiResource):
    def track(
        self,
        name: str,
        email: str | None = None,
        attrs: dict[str, Any] | None = None,
    ) -> Response:
        """Track a custom event. ``attrs`` may carry ``userId``, ``dataFields``, ``createdAt``."""
        attrs = dict(attrs or {})
        attrs["eventName"] = name
        if email is not None:
            attrs["email"] = email
        return self._request("/events/track").post(attrs)

    def track_bulk(self, events: list[dict[str, Any]] | None = None) -> Response:
        return self._request("/events/trackBulk").post({"events": list(events or [])})

    def for_email(self, email: str) -> Response:
        return self._request(f"/events/{path_segment(email)}").get()
