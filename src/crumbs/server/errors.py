"""Error handling pipeline for crumbs requests.

Maps HTTPError exceptions, cookie errors, and unexpected failures to
Response objects, using registered error handlers or plain defaults.
No exception leaves this module: every failure becomes a response for
the request that caused it.
"""

import inspect
import logging
from collections.abc import Callable
from typing import Any

from crumbs.errors import BadRequest, CookieError, HTTPError
from crumbs.http.request import Request
from crumbs.http.response import Response
from crumbs.server.terminal_errors import format_compact_traceback, log_error

logger = logging.getLogger("crumbs.server")


def to_response(result: Any) -> Response:
    """Convert a handler return value into a Response.

    ``str`` and ``bytes`` become a 200 plain-text body; a ``Response`` is
    passed through.
    """
    if isinstance(result, Response):
        return result
    if isinstance(result, (str, bytes)):
        return Response(body=result)
    msg = f"Handler returned {type(result).__name__}; expected Response, str, or bytes."
    raise TypeError(msg)


async def call_error_handler(
    handler: Callable[..., Any],
    request: Request,
    exc: Exception,
) -> Response:
    """Invoke a user-registered error handler with introspected arguments.

    Error handlers may accept zero, one (request), or two (request, exc) args.
    Supports both sync and async error handlers.
    """
    sig = inspect.signature(handler)
    params = list(sig.parameters.values())

    if len(params) >= 2:
        result = handler(request, exc)
    elif len(params) == 1:
        result = handler(request)
    else:
        result = handler()

    if inspect.isawaitable(result):
        result = await result

    return to_response(result)


async def handle_http_error(
    exc: HTTPError,
    request: Request,
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> Response:
    """Map an HTTPError to a Response using registered error handlers."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    # Try exact exception type, then status code
    handler = error_handlers.get(type(exc)) or error_handlers.get(exc.status)
    if handler is not None:
        response = await call_error_handler(handler, request, exc)
        # Preserve the HTTP status from the exception unless the handler
        # explicitly returned a Response with its own status
        if response.status == 200:
            response = response.with_status(exc.status)
        return response

    detail = exc.detail or f"Error {exc.status}"
    if debug and exc.detail:
        detail = f"{exc.status}: {exc.detail}"

    resp = Response(body=detail).with_status(exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


async def handle_cookie_error(
    exc: CookieError,
    request: Request,
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> Response:
    """Answer a malformed or uninterpretable cookie with 400."""
    logger.warning("400 %s %s: %s", request.method, request.path, exc)

    handler = error_handlers.get(type(exc))
    if handler is not None:
        response = await call_error_handler(handler, request, exc)
        if response.status == 200:
            response = response.with_status(400)
        return response

    return await handle_http_error(BadRequest(str(exc)), request, error_handlers, debug)


async def handle_internal_error(
    exc: Exception,
    request: Request,
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    log_error(exc, request)

    handler = error_handlers.get(500) or error_handlers.get(type(exc))
    if handler is not None:
        try:
            return (await call_error_handler(handler, request, exc)).with_status(500)
        except Exception:
            logger.exception("Error handler for 500 failed on %s %s", request.method, request.path)

    if debug:
        return Response(body=format_compact_traceback(exc), status=500)

    return Response(body="Internal Server Error", status=500)
