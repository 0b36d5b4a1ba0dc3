"""ASGI response sending — translates a crumbs Response to ASGI messages."""

from typing import Any

from crumbs._internal.asgi import Send
from crumbs.http.response import Response


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def build_headers(response: Response) -> list[tuple[bytes, bytes]]:
    """Raw ASGI header pairs for *response*, without Content-Length."""
    raw_headers: list[tuple[bytes, bytes]] = [
        (b"content-type", response.content_type.encode("latin-1")),
    ]
    for name, value in response.headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))
    raw_headers.extend(
        (b"set-cookie", cookie.to_header_value().encode("latin-1")) for cookie in response.cookies
    )
    return raw_headers


def encode_response(response: Response) -> list[dict[str, Any]]:
    """Build the ``http.response.start`` and ``http.response.body`` messages.

    Raises whatever header encoding raises (e.g. ``UnicodeEncodeError``),
    so callers can encode inside their error handling and send afterwards.
    """
    raw_headers = build_headers(response)

    body = response.body_bytes if _body_allowed(response.status) else b""

    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    return [
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        },
        {
            "type": "http.response.body",
            "body": body,
        },
    ]


async def send_messages(messages: list[dict[str, Any]], send: Send) -> None:
    """Emit pre-encoded response messages in order."""
    for message in messages:
        await send(message)
