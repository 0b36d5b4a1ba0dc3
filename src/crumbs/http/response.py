"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. Immutable by convention,
built incrementally by design.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace

from crumbs.http.cookies import CookieAttribute, MaxAge, SetCookie


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set
    status, headers, and cookies. Each call returns a new ``Response``.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/plain; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()
    cookies: tuple[SetCookie, ...] = ()

    # -- Chainable transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        new = tuple(headers.items())
        return replace(self, headers=(*self.headers, *new))

    def with_content_type(self, content_type: str) -> Response:
        """Return a new Response with a different content type."""
        return replace(self, content_type=content_type)

    def with_cookie(self, name: str, value: str, *attributes: CookieAttribute) -> Response:
        """Return a new Response with an additional Set-Cookie.

        Usage::

            response.with_cookie("message", "shhh", CookieFlag.HTTP_ONLY)
            response.with_cookie("timeout", "when?", MaxAge(30))
        """
        cookie = SetCookie(name=name, value=value, attributes=attributes)
        return replace(self, cookies=(*self.cookies, cookie))

    def without_cookie(self, name: str) -> Response:
        """Return a new Response that deletes a cookie (Max-Age=0)."""
        return self.with_cookie(name, "", MaxAge(0))

    # -- Header lookups --

    def header(self, name: str) -> str | None:
        """Return the first value of header *name* (case-insensitive)."""
        lower = name.lower()
        for key, value in self.headers:
            if key.lower() == lower:
                return value
        return None

    def header_list(self, name: str) -> list[str]:
        """Return every value of header *name* (case-insensitive)."""
        lower = name.lower()
        return [value for key, value in self.headers if key.lower() == lower]

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body
