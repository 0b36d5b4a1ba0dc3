"""Immutable HTTP request.

Frozen metadata taken from the ASGI scope. The request is honest about
what it is: received data that doesn't change. crumbs routes never read
a request body, so none is exposed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from crumbs.http.cookies import SEGMENT_SEPARATOR, parse_cookies
from crumbs.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Metadata (method, path, headers, etc.) is frozen at creation.

    Cookies are parsed lazily on first access to ``.cookies`` and cached.
    Routes that never look at cookies never pay for, or fail on, a
    malformed ``Cookie`` header.
    """

    method: str
    path: str
    headers: Headers
    query_string: str
    http_version: str
    server: tuple[str, int] | None
    client: tuple[str, int] | None

    # Private: mutable cache for parsed cookies
    # (dict contents are mutable even though the field reference is frozen)
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    # -- Computed properties --

    @property
    def cookie_header(self) -> str | None:
        """The raw ``Cookie`` header, or ``None`` when the client sent none.

        Several ``Cookie`` lines (as HTTP/2 proxies may send) are joined
        with the standard segment separator.
        """
        values = self.headers.get_list("cookie")
        if not values:
            return None
        return SEGMENT_SEPARATOR.join(values)

    @property
    def cookies(self) -> dict[str, str]:
        """The client cookie jar for this request.

        Raises:
            CookieDecodeError: The ``Cookie`` header is malformed.
        """
        if "_cookies" not in self._cache:
            self._cache["_cookies"] = parse_cookies(self.cookie_header)
        return self._cache["_cookies"]

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query_string=scope.get("query_string", b"").decode("latin-1"),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
        )
