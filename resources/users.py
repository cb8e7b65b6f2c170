"""/users endpoints."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

from resources.base import ApiResource, path_segment
from schemas.response import Response

TimeLike = datetime | date | str


def format_time(value: TimeLike) -> str:
    """Render a time bound as ``YYYY-MM-DD HH:MM:SS +HH:MM``.

    Naive datetimes are taken to be UTC. Dates render as ``YYYY-MM-DD`` and
    strings pass through untouched.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        offset = value.strftime("%z")
        return f"{value:%Y-%m-%d %H:%M:%S} {offset[:3]}:{offset[3:5]}"
    if isinstance(value, date):
        return value.isoformat()
    return value


class Users(ApiResource):
    """Interact with /users API endpoints.

    Methods taking an ``attrs``/``params`` mapping copy it before adding
    keys, so the caller's dict is left as it was.
    """

    def update(self, email: str | None, attrs: dict[str, Any] | None = None) -> Response:
        """Update user data or add the user if missing. Fields are merged, not replaced."""
        attrs = dict(attrs or {})
        if email is not None:
            attrs["email"] = email
        return self._request("/users/update").post(attrs)

    def bulk_update(self, users: list[dict[str, Any]] | None = None) -> Response:
        """Bulk update. Each entry may carry ``email``, ``userId`` and ``dataFields``."""
        return self._request("/users/bulkUpdate").post({"users": list(users or [])})

    def update_subscriptions(
        self, email: str | None, attrs: dict[str, Any] | None = None
    ) -> Response:
        """Overwrite subscription fields that are provided and not null."""
        attrs = dict(attrs or {})
        if email is not None:
            attrs["email"] = email
        return self._request("/users/updateSubscriptions").post(attrs)

    def bulk_update_subscriptions(
        self, subscriptions: list[dict[str, Any]] | None = None
    ) -> Response:
        attrs = {"updateSubscriptionsRequests": list(subscriptions or [])}
        return self._request("/users/bulkUpdateSubscriptions").post(attrs)

    def for_email(self, email: str) -> Response:
        return self._request(f"/users/{path_segment(email)}").get()

    def update_email(self, email: str, new_email: str) -> Response:
        attrs = {"currentEmail": email, "newEmail": new_email}
        return self._request("/users/updateEmail").post(attrs)

    def delete(self, email: str) -> Response:
        return self._request(f"/users/{path_segment(email)}").delete()

    def delete_by_id(self, user_id: str | int) -> Response:
        return self._request(f"/users/byUserId/{path_segment(user_id)}").delete()

    def for_id(self, user_id: str | int) -> Response:
        return self._request(f"/users/byUserId/{path_segment(user_id)}").get()

    def fields(self) -> Response:
        """Get the user fields, mapped from field name to type."""
        return self._request("/users/getFields").get()

    def register_browser_token(
        self, email: str, token: str, attrs: dict[str, Any] | None = None
    ) -> Response:
        """Register a browser push token. ``attrs`` may carry ``userId`` instead of email."""
        attrs = dict(attrs or {})
        attrs["email"] = email
        attrs["browserToken"] = token
        return self._request("/users/registerBrowserToken").post(attrs)

    def disable_device(
        self,
        token: str,
        email: str | None = None,
        user_id: str | int | None = None,
    ) -> Response:
        """Disable push to a device token. An email or user_id is required by the API."""
        attrs: dict[str, Any] = {"token": token}
        if email is not None:
            attrs["email"] = email
        if user_id is not None:
            attrs["userId"] = user_id
        return self._request("/users/disableDevice").post(attrs)

    def sent_messages(
        self,
        email: str,
        start_time: TimeLike | None = None,
        end_time: TimeLike | None = None,
        params: dict[str, Any] | None = None,
    ) -> Response:
        """List messages sent to a user, optionally bounded in time.

        Extra ``params`` (``limit``, ``campaignId``, ``messageMedium``, ...)
        are passed through to the query string.
        """
        params = dict(params or {})
        params["email"] = email
        if start_time is not None:
            params["startTime"] = format_time(start_time)
        if end_time is not None:
            params["endTime"] = format_time(end_time)
        return self._request("/users/getSentMessages", params).get()

    def forget(self, email: str) -> Response:
        """Delete a user's data and stop future collection about them."""
        return self._request("/users/forget").post({"email": email})
