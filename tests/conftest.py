"""Shared fixtures for tests: all HTTP traffic goes through httpx.MockTransport."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
import pytest
import structlog

from config.settings import Settings, reset_settings


class Recorder:
    """Captures outbound requests and answers each with a canned reply."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.reply: Any = {"msg": "", "code": "Success"}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.reply, (dict, list)):
            return httpx.Response(self.status_code, json=self.reply)
        return httpx.Response(self.status_code, text=self.reply or "")

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        content = self.last.content
        return json.loads(content) if content else None


@pytest.fixture(autouse=True)
def _clean_default_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings() -> Settings:
    return Settings(token="test-token", base_uri="https://api.iterable.test/api")


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def http_client(recorder):
    with httpx.Client(transport=httpx.MockTransport(recorder)) as client:
        yield client


@pytest.fixture
def logging_state():
    """Restore structlog and the stdlib root level after a test configures logging."""
    root = logging.getLogger()
    level = root.level
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    root.setLevel(level)
