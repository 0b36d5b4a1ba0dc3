"""ASGI handler — translates ASGI scope/messages to crumbs types.

The only component that touches raw ASGI directly. Converts scope dicts
to typed Request objects, dispatches through middleware and routing,
and sends the Response back through ASGI send().
"""

import logging
from collections.abc import Callable
from typing import Any

from crumbs._internal.asgi import Receive, Scope, Send
from crumbs._internal.invoke import invoke
from crumbs.errors import CookieError, HTTPError
from crumbs.http.request import Request
from crumbs.http.response import Response
from crumbs.middleware.protocol import Next
from crumbs.routing.router import Router
from crumbs.server.errors import (
    handle_cookie_error,
    handle_http_error,
    handle_internal_error,
    to_response,
)
from crumbs.server.sender import encode_response, send_messages

logger = logging.getLogger("crumbs.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    middleware: tuple[Callable[..., Any], ...],
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    # Innermost handler: exact-path lookup, then the route handler
    async def dispatch(req: Request) -> Response:
        match = router.match(req.path)
        result = await invoke(match.route.handler, req)
        return to_response(result)

    # Wrap middleware around the dispatch (first added = outermost)
    handler: Next = dispatch
    for mw in reversed(middleware):
        outer = handler

        async def make_next(req: Request, _mw: Any = mw, _next: Next = outer) -> Response:
            return await _mw(req, _next)

        handler = make_next

    # Encoding happens inside the guard: a bad header value is this request's 500
    try:
        response = await handler(request)
        messages = encode_response(response)
    except Exception as exc:
        response = await error_response(exc, request, error_handlers, debug)
        try:
            messages = encode_response(response)
        except Exception:
            logger.exception("Cannot encode error response for %s %s", request.method, request.path)
            messages = encode_response(Response(body="Internal Server Error", status=500))

    await send_messages(messages, send)


async def error_response(
    exc: Exception,
    request: Request,
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> Response:
    """Map any exception raised while handling *request* to a Response.

    A failure inside a registered error handler degrades to a bare 500
    rather than escaping to the server.
    """
    try:
        if isinstance(exc, HTTPError):
            return await handle_http_error(exc, request, error_handlers, debug)
        if isinstance(exc, CookieError):
            return await handle_cookie_error(exc, request, error_handlers, debug)
        return await handle_internal_error(exc, request, error_handlers, debug)
    except Exception:
        logger.exception("Error handling failed for %s %s", request.method, request.path)
        return Response(body="Internal Server Error", status=500)
