"""/lists endpoints."""

from __future__ import annotations

from typing import Any

from resources.base import ApiResource, path_segment
from schemas.response import Response


class Lists(ApiResource):
    """Interact with /lists API endpoints.

    Example::

        lists = Lists()                          # default settings
        lists = Lists(Settings(token="..."))     # explicit settings
        lists.all()
    """

    def all(self) -> Response:
        return self._request("/lists").get()

    def create(self, name: str) -> Response:
        return self._request("/lists").post({"name": name})

    def delete(self, list_id: str | int) -> Response:
        return self._request(f"/lists/{path_segment(list_id)}").delete()

    def users(self, list_id: str | int) -> Response:
        """Export the emails of everyone on a list."""
        return self._request("/lists/getUsers", {"listId": list_id}).get()

    def subscribe(self, list_id: str | int, subscribers: list[dict[str, Any]]) -> Response:
        """Add users to a static list. Each subscriber carries ``email`` or ``userId``."""
        attrs = {"listId": list_id, "subscribers": list(subscribers)}
        return self._request("/lists/subscribe").post(attrs)

    def unsubscribe(self, list_id: str | int, subscribers: list[dict[str, Any]]) -> Response:
        attrs = {"listId": list_id, "subscribers": list(subscribers)}
        return self._request("/lists/unsubscribe").post(attrs)
