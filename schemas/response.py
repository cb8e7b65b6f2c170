"""Uniform response wrapper returned by every resource method."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from schemas.errors import ApiError

if TYPE_CHECKING:
    import httpx


class Response(BaseModel):
    """Status and parsed body of a single API call.

    ``body`` holds the decoded JSON document when the reply parses as JSON,
    the raw text otherwise, and ``None`` for an empty reply.
    """

    status_code: int
    body: Any = None
    headers: dict[str, str] = Field(default_factory=dict)
    url: str = ""
    reason: str = ""

    @classmethod
    def from_httpx(cls, resp: httpx.Response, url: str = "") -> Response:
        return cls(
            status_code=resp.status_code,
            body=_parse_body(resp),
            headers=dict(resp.headers),
            url=url,
            reason=resp.reason_phrase,
        )

    @property
    def success(self) -> bool:
        return 200 <= self.status_code < 300

    def raise_for_status(self) -> Response:
        if not self.success:
            raise ApiError(self.status_code, body=self.body, url=self.url)
        return self


def _parse_body(resp: httpx.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text
