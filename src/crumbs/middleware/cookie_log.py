"""Cookie logging middleware.

Parses the inbound ``Cookie`` header and logs each name/value pair
before the request reaches the router.  Purely diagnostic: a malformed
header is reported as a warning and the request continues unchanged.
"""

import logging

from crumbs.errors import CookieDecodeError
from crumbs.http.cookies import parse_cookies
from crumbs.http.request import Request
from crumbs.http.response import Response
from crumbs.middleware.protocol import Next

logger = logging.getLogger("crumbs.cookies")


class CookieLogger:
    """Middleware that logs the client cookie jar of every request.

    Output for ``Cookie: count=2; message=shhh``::

        Cookies:
        count 2
        message shhh

    Usage::

        app.add_middleware(CookieLogger())
    """

    __slots__ = ("_level", "_logger")

    def __init__(self, *, level: int = logging.INFO, log: logging.Logger | None = None) -> None:
        self._level = level
        self._logger = log or logger

    async def __call__(self, request: Request, next: Next) -> Response:
        """Log the cookies, then hand the request on."""
        if self._logger.isEnabledFor(self._level):
            self._log_cookies(request)
        return await next(request)

    def _log_cookies(self, request: Request) -> None:
        header = request.cookie_header
        try:
            cookies = parse_cookies(header)
        except CookieDecodeError as exc:
            self._logger.warning(
                "%s %s: unreadable Cookie header: %s", request.method, request.path, exc
            )
            return

        lines = ["Cookies:"]
        lines.extend(f"{name} {value}" for name, value in cookies.items())
        self._logger.log(self._level, "\n".join(lines))
