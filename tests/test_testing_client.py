"""Tests for crumbs.testing — the cookie-jar test client and assertions."""

from pathlib import Path

import pytest

from crumbs.app import App
from crumbs.config import AppConfig
from crumbs.http.cookies import CookieFlag
from crumbs.http.request import Request
from crumbs.http.response import Response
from crumbs.testing import TestClient, assert_no_set_cookie, assert_set_cookie, set_cookies


@pytest.fixture
def app(public_dir: Path) -> App:
    app = App(AppConfig(public_dir=public_dir, log_cookies=False))

    @app.route("/set")
    def set_(request: Request) -> Response:
        return Response("set").with_cookie("a", "1").with_cookie("b", "two words")

    @app.route("/clear")
    def clear(request: Request) -> Response:
        return Response("cleared").without_cookie("a")

    @app.route("/echo")
    def echo(request: Request) -> str:
        return request.cookie_header or "<none>"

    @app.route("/query")
    def query(request: Request) -> str:
        return request.query_string

    return app


class TestCookieJar:
    async def test_starts_empty(self, app: App) -> None:
        async with TestClient(app) as client:
            assert client.cookies == {}
            assert client.cookie_header() is None
            assert (await client.get("/echo")).text == "<none>"

    async def test_initial_cookies(self, app: App) -> None:
        async with TestClient(app, cookies={"count": "5"}) as client:
            assert (await client.get("/echo")).text == "count=5"

    async def test_stores_set_cookie(self, app: App) -> None:
        async with TestClient(app) as client:
            await client.get("/set")
            assert client.cookies == {"a": "1", "b": "two words"}
            assert (await client.get("/echo")).text == "a=1; b=two%20words"

    async def test_max_age_zero_deletes(self, app: App) -> None:
        async with TestClient(app) as client:
            await client.get("/set")
            await client.get("/clear")
            assert "a" not in client.cookies
            assert client.cookies == {"b": "two words"}

    async def test_explicit_cookie_header_wins(self, app: App) -> None:
        async with TestClient(app, cookies={"count": "5"}) as client:
            response = await client.get("/echo", headers={"Cookie": "raw=value"})
        assert response.text == "raw=value"

    async def test_query_string_forwarded(self, app: App) -> None:
        async with TestClient(app) as client:
            response = await client.get("/query?x=1&y=2")
        assert response.text == "x=1&y=2"


class TestAssertions:
    async def test_set_cookies(self, app: App) -> None:
        async with TestClient(app) as client:
            response = await client.get("/set")
        cookies = set_cookies(response)
        assert list(cookies) == ["a", "b"]
        assert cookies["b"].value == "two words"

    def test_assert_set_cookie_passes(self) -> None:
        response = Response().with_header("set-cookie", "message=shhh; HttpOnly")
        cookie = assert_set_cookie(response, "message", "shhh", CookieFlag.HTTP_ONLY)
        assert cookie.http_only

    def test_assert_set_cookie_missing(self) -> None:
        with pytest.raises(AssertionError, match="does not set cookie 'count'"):
            assert_set_cookie(Response(), "count")

    def test_assert_set_cookie_wrong_value(self) -> None:
        response = Response().with_header("set-cookie", "count=1")
        with pytest.raises(AssertionError, match="expected '2'"):
            assert_set_cookie(response, "count", "2")

    def test_assert_set_cookie_missing_attribute(self) -> None:
        response = Response().with_header("set-cookie", "message=shhh")
        with pytest.raises(AssertionError, match="missing attribute HttpOnly"):
            assert_set_cookie(response, "message", "shhh", CookieFlag.HTTP_ONLY)

    def test_assert_no_set_cookie(self) -> None:
        assert_no_set_cookie(Response())
        with pytest.raises(AssertionError, match="unexpectedly sets cookies"):
            assert_no_set_cookie(Response().with_header("set-cookie", "a=1"))
