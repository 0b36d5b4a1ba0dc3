"""Tests for crumbs.http.request and crumbs.http.headers."""

from typing import Any

import pytest

from crumbs.errors import CookieDecodeError
from crumbs.http.headers import Headers
from crumbs.http.request import Request


def _scope(
    path: str = "/",
    *,
    method: str = "GET",
    headers: list[tuple[bytes, bytes]] | None = None,
    query_string: bytes = b"",
) -> dict[str, Any]:
    return {
        "type": "http",
        "method": method,
        "path": path,
        "headers": headers or [],
        "query_string": query_string,
        "http_version": "1.1",
        "server": ("localhost", 3000),
        "client": ("127.0.0.1", 50000),
    }


def _request(**kwargs: Any) -> Request:
    return Request.from_asgi(_scope(**kwargs))


class TestHeaders:
    def test_case_insensitive(self) -> None:
        h = Headers(((b"content-type", b"text/html"),))
        assert h["Content-Type"] == "text/html"
        assert "CONTENT-TYPE" in h

    def test_missing(self) -> None:
        h = Headers()
        assert h.get("cookie") is None
        with pytest.raises(KeyError):
            h["cookie"]

    def test_get_list(self) -> None:
        h = Headers(((b"cookie", b"a=1"), (b"Cookie", b"b=2")))
        assert h.get_list("cookie") == ["a=1", "b=2"]
        assert h["cookie"] == "a=1"

    def test_iter_unique_names(self) -> None:
        h = Headers(((b"cookie", b"a=1"), (b"cookie", b"b=2"), (b"host", b"x")))
        assert list(h) == ["cookie", "host"]
        assert len(h) == 2

    def test_from_mapping(self) -> None:
        h = Headers.from_mapping({"Cookie": "count=1"})
        assert h.raw == ((b"cookie", b"count=1"),)


class TestRequestFromAsgi:
    def test_fields(self) -> None:
        req = _request(path="/reset", method="POST", query_string=b"x=1")
        assert req.method == "POST"
        assert req.path == "/reset"
        assert req.query_string == "x=1"
        assert req.server == ("localhost", 3000)
        assert req.client == ("127.0.0.1", 50000)

    def test_frozen(self) -> None:
        req = _request()
        with pytest.raises(AttributeError):
            req.path = "/other"  # type: ignore[misc]


class TestRequestCookies:
    def test_no_header(self) -> None:
        req = _request()
        assert req.cookie_header is None
        assert req.cookies == {}

    def test_parsed(self) -> None:
        req = _request(headers=[(b"cookie", b"count=2; message=shhh")])
        assert req.cookies == {"count": "2", "message": "shhh"}

    def test_multiple_cookie_lines_joined(self) -> None:
        req = _request(headers=[(b"cookie", b"a=1"), (b"cookie", b"b=2")])
        assert req.cookie_header == "a=1; b=2"
        assert req.cookies == {"a": "1", "b": "2"}

    def test_cached(self) -> None:
        req = _request(headers=[(b"cookie", b"count=2")])
        assert req.cookies is req.cookies

    def test_malformed_raises_on_access(self) -> None:
        req = _request(headers=[(b"cookie", b"broken")])
        assert req.cookie_header == "broken"
        with pytest.raises(CookieDecodeError):
            req.cookies
