"""Crumbs exception hierarchy.

Shared across the cookie codec, router, asset store, and request pipeline
so every module raises and catches the same types.
"""

from dataclasses import dataclass


class CrumbsError(Exception):
    """Base for all crumbs-specific errors."""


class ConfigurationError(CrumbsError):
    """Raised when app configuration or the route table is invalid.

    Typically raised during ``App._freeze()`` at startup.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(CrumbsError):
    """An error that maps directly to an HTTP status code.

    Raised by the router, the asset store, or handlers. The ASGI handler
    catches these and dispatches to the matching ``@app.error()`` handler.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class BadRequest(HTTPError):  # noqa: N818
    """400 — the request carried data the server cannot interpret."""

    def __init__(self, detail: str = "Bad Request") -> None:
        super().__init__(status=400, detail=detail)


class NotFound(HTTPError):  # noqa: N818
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class InternalServerError(HTTPError):  # noqa: N818
    """500 — the server could not produce the response."""

    def __init__(self, detail: str = "Internal Server Error") -> None:
        super().__init__(status=500, detail=detail)


# -- Cookie errors --


class CookieError(CrumbsError, ValueError):
    """A cookie could not be parsed, serialized, or interpreted.

    The request pipeline answers these with ``400 Bad Request``.
    """


class CookieDecodeError(CookieError):
    """A ``Cookie`` header segment is malformed.

    Raised for segments without ``=`` and for values that are not valid
    percent-encoding (stray ``%``, or bytes that do not decode as UTF-8).
    """

    def __init__(self, segment: str, reason: str) -> None:
        self.segment = segment
        self.reason = reason
        super().__init__(f"Malformed cookie segment {segment!r}: {reason}")


class InvalidCounter(CookieError):  # noqa: N818
    """The session counter cookie holds something other than an integer."""

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Cookie {name!r} is not an integer: {value!r}")


# -- Static asset errors --


class AssetNotFound(NotFound):
    """404 — a static asset does not exist in the public directory."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Asset {name!r} not found")


class AssetUnavailable(InternalServerError):
    """500 — a static asset exists but could not be read."""

    def __init__(self, name: str, reason: str = "") -> None:
        detail = f"Asset {name!r} could not be read"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(detail)
