"""Tests for crumbs.http.response — chainable transformations and cookies."""

import pytest

from crumbs.http.cookies import CookieFlag, MaxAge, SetCookie
from crumbs.http.response import Response


class TestResponseDefaults:
    def test_defaults(self) -> None:
        r = Response()
        assert r.status == 200
        assert r.content_type == "text/plain; charset=utf-8"
        assert r.headers == ()
        assert r.cookies == ()

    def test_frozen(self) -> None:
        r = Response("x")
        with pytest.raises(AttributeError):
            r.status = 404  # type: ignore[misc]


class TestResponseTransformations:
    def test_with_status_returns_new(self) -> None:
        r = Response("x")
        r2 = r.with_status(404)
        assert r.status == 200
        assert r2.status == 404

    def test_with_header(self) -> None:
        r = Response().with_header("X-A", "1").with_header("X-A", "2")
        assert r.header("x-a") == "1"
        assert r.header_list("X-A") == ["1", "2"]

    def test_with_headers(self) -> None:
        r = Response().with_headers({"X-A": "1", "X-B": "2"})
        assert r.headers == (("X-A", "1"), ("X-B", "2"))

    def test_missing_header(self) -> None:
        assert Response().header("x-missing") is None

    def test_with_content_type(self) -> None:
        assert Response().with_content_type("text/css").content_type == "text/css"


class TestResponseCookies:
    def test_with_cookie(self) -> None:
        r = Response("page").with_cookie("message", "shhh", CookieFlag.HTTP_ONLY)
        assert r.cookies == (
            SetCookie(name="message", value="shhh", attributes=(CookieFlag.HTTP_ONLY,)),
        )

    def test_cookies_accumulate(self) -> None:
        r = Response().with_cookie("a", "1").with_cookie("b", "2", MaxAge(30))
        assert [c.name for c in r.cookies] == ["a", "b"]
        assert r.cookies[1].max_age == 30

    def test_without_cookie(self) -> None:
        r = Response().without_cookie("count")
        (cookie,) = r.cookies
        assert cookie.to_header_value() == "count=; Max-Age=0"


class TestResponseBody:
    def test_str_body(self) -> None:
        r = Response("café")
        assert r.body_bytes == "café".encode()
        assert r.text == "café"

    def test_bytes_body(self) -> None:
        r = Response(b"raw")
        assert r.body_bytes == b"raw"
        assert r.text == "raw"
