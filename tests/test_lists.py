"""Tests for the /lists resource."""

from __future__ import annotations

import pytest

from config.settings import configure
from resources.lists import Lists


@pytest.fixture
def lists(settings, http_client) -> Lists:
    return Lists(settings, http_client)


def test_all(lists, recorder):
    lists.all()

    assert len(recorder.requests) == 1
    assert recorder.last.method == "GET"
    assert recorder.last.url.path == "/api/lists"


def test_create_posts_name(lists, recorder):
    recorder.reply = {"listId": 1234}

    resp = lists.create("VIP")

    assert recorder.last.method == "POST"
    assert recorder.last.url.path == "/api/lists"
    assert recorder.last_json() == {"name": "VIP"}
    assert resp.status_code == 200
    assert resp.body == {"listId": 1234}


def test_create_reports_server_failure(lists, recorder):
    recorder.status_code = 400
    recorder.reply = {"msg": "Invalid list name", "code": "BadParams"}

    resp = lists.create("")

    assert resp.status_code == 400
    assert not resp.success


def test_delete(lists, recorder):
    lists.delete(1234)

    assert recorder.last.method == "DELETE"
    assert recorder.last.url.path == "/api/lists/1234"
    assert recorder.last.content == b""


def test_users_sends_list_id_as_query(lists, recorder):
    recorder.reply = "a@example.com\nb@example.com"

    resp = lists.users(1234)

    assert recorder.last.method == "GET"
    assert recorder.last.url.path == "/api/lists/getUsers"
    assert recorder.last.url.params["listId"] == "1234"
    assert resp.body == "a@example.com\nb@example.com"


@pytest.mark.parametrize("method, path", [("subscribe", "/api/lists/subscribe"), ("unsubscribe", "/api/lists/unsubscribe")])
def test_subscription_changes(lists, recorder, method, path):
    subscribers = [{"email": "a@example.com"}, {"userId": "42"}]

    getattr(lists, method)(1234, subscribers)

    assert recorder.last.method == "POST"
    assert recorder.last.url.path == path
    assert recorder.last_json() == {"listId": 1234, "subscribers": subscribers}


def test_uses_default_settings_when_none_given(http_client, recorder):
    configure(token="default-token", base_uri="https://default.iterable.test/api")

    Lists(client=http_client).all()

    assert recorder.last.headers["Api-Key"] == "default-token"
    assert recorder.last.url.host == "default.iterable.test"
