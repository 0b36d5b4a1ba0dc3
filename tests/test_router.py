"""Tests for crumbs.routing.router — exact-path route table."""

import pytest

from crumbs.errors import ConfigurationError, NotFound
from crumbs.routing.route import Route
from crumbs.routing.router import Router, validate_path


def _handler() -> str:
    return "ok"


def _other() -> str:
    return "other"


def _route(path: str) -> Route:
    return Route(path=path, handler=_handler)


class TestValidatePath:
    def test_accepts_root(self) -> None:
        assert validate_path("/") == "/"

    def test_accepts_file_like_path(self) -> None:
        assert validate_path("/index.html") == "/index.html"

    def test_requires_leading_slash(self) -> None:
        with pytest.raises(ConfigurationError, match="must start with '/'"):
            validate_path("reset")

    @pytest.mark.parametrize("path", ["/reset?x=1", "/page#top"])
    def test_rejects_query_and_fragment(self, path: str) -> None:
        with pytest.raises(ConfigurationError, match="query or fragment"):
            validate_path(path)


class TestRouterMatch:
    def test_root(self) -> None:
        r = Router()
        r.add(_route("/"))
        r.compile()

        match = r.match("/")
        assert match.route.path == "/"
        assert match.path == "/"

    def test_exact_path(self) -> None:
        r = Router()
        r.add(_route("/reset"))
        r.add(Route(path="/increment", handler=_other))
        r.compile()

        assert r.match("/increment").route.handler is _other

    def test_unknown_path(self) -> None:
        r = Router()
        r.add(_route("/reset"))
        r.compile()

        with pytest.raises(NotFound) as exc_info:
            r.match("/nope")
        assert exc_info.value.status == 404
        assert "/nope" in exc_info.value.detail

    def test_trailing_slash_is_a_different_path(self) -> None:
        r = Router()
        r.add(_route("/reset"))
        r.compile()

        with pytest.raises(NotFound):
            r.match("/reset/")

    def test_no_prefix_matching(self) -> None:
        r = Router()
        r.add(_route("/app.js"))
        r.compile()

        with pytest.raises(NotFound):
            r.match("/app.js/extra")

    def test_case_sensitive(self) -> None:
        r = Router()
        r.add(_route("/secret"))
        r.compile()

        with pytest.raises(NotFound):
            r.match("/Secret")


class TestRouterRegistration:
    def test_duplicate_path(self) -> None:
        r = Router()
        r.add(_route("/reset"))

        with pytest.raises(ConfigurationError, match="Duplicate route '/reset'"):
            r.add(Route(path="/reset", handler=_other))

    def test_add_after_compile(self) -> None:
        r = Router()
        r.compile()

        with pytest.raises(RuntimeError, match="after compilation"):
            r.add(_route("/late"))

    def test_routes_in_registration_order(self) -> None:
        r = Router()
        for path in ("/", "/index.html", "/reset"):
            r.add(_route(path))

        assert [route.path for route in r.routes] == ["/", "/index.html", "/reset"]

    def test_one_handler_many_paths(self) -> None:
        r = Router()
        r.add(_route("/"))
        r.add(_route("/index.html"))
        r.compile()

        assert r.match("/").route.handler is r.match("/index.html").route.handler
