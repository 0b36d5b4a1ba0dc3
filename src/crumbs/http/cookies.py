"""Cookie parsing and SetCookie serialization.

Consolidates the read side (parse_cookies, used by Request) and the
write side (serialize_cookie / SetCookie, used by Response) in one module.

Values are percent-encoded on the wire.  Decoding is strict: anything
that is not valid percent-encoding raises ``CookieDecodeError`` instead
of leaking a half-decoded value into the application.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import quote, unquote

from crumbs.errors import CookieDecodeError, CookieError

# Segments of a Cookie header are separated by a semicolon and one space
SEGMENT_SEPARATOR = "; "

# RFC 7230 token characters (cookie names)
_TOKEN_RE = re.compile(r"[!#$&'*+\-.^_`|~0-9A-Za-z]+")

# A '%' that does not start a two-digit hex escape
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# RFC 6265 cookie-octet minus '%' (which always introduces an escape)
_COOKIE_SAFE = "".join(
    chr(c)
    for c in range(0x21, 0x7F)
    if chr(c) not in {'"', ",", ";", "\\", "%"}
)


def decode_value(value: str, segment: str = "") -> str:
    """Strictly percent-decode a cookie value.

    Raises ``CookieDecodeError`` when *value* contains a stray ``%`` or
    escapes that do not form valid UTF-8.
    """
    if _BAD_ESCAPE_RE.search(value):
        raise CookieDecodeError(segment or value, "invalid percent-encoding")
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError as exc:
        raise CookieDecodeError(segment or value, "escapes are not valid UTF-8") from exc


def encode_value(value: str) -> str:
    """Percent-encode the characters that may not appear in a cookie value."""
    return quote(value, safe=_COOKIE_SAFE)


def parse_cookies(header: str | None) -> dict[str, str]:
    """Parse a ``Cookie`` header value into a name-value dict.

    Returns an empty dict for empty or missing headers.  Each segment is
    split once on ``=``; on duplicate names the last one wins.

    Raises:
        CookieDecodeError: A segment has no ``=`` or its value is not
            valid percent-encoding.
    """
    if not header:
        return {}
    cookies: dict[str, str] = {}
    for segment in header.split(SEGMENT_SEPARATOR):
        if not segment:
            continue
        name, sep, value = segment.partition("=")
        if not sep:
            raise CookieDecodeError(segment, "missing '='")
        cookies[name] = decode_value(value, segment)
    return cookies


class CookieFlag(StrEnum):
    """Valueless ``Set-Cookie`` attributes."""

    HTTP_ONLY = "HttpOnly"
    SECURE = "Secure"


@dataclass(frozen=True, slots=True)
class MaxAge:
    """The ``Max-Age=<seconds>`` attribute."""

    seconds: int

    def __post_init__(self) -> None:
        if isinstance(self.seconds, bool) or not isinstance(self.seconds, int):
            msg = f"Max-Age must be an int, got {type(self.seconds).__name__}"
            raise TypeError(msg)
        if self.seconds < 0:
            msg = f"Max-Age must be non-negative, got {self.seconds}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"Max-Age={self.seconds}"


type CookieAttribute = CookieFlag | MaxAge


def serialize_cookie(
    name: str,
    value: str,
    attributes: Iterable[CookieAttribute] = (),
) -> str:
    """Serialize one ``Set-Cookie`` header value.

    Produces ``name=value[; Attr]*`` with attributes in the order given;
    repeated attributes are emitted once.

    Example::

        serialize_cookie("message", "shhh", [CookieFlag.HTTP_ONLY])
        # 'message=shhh; HttpOnly'
    """
    if not _TOKEN_RE.fullmatch(name):
        msg = f"Invalid cookie name {name!r}"
        raise CookieError(msg)
    parts = [f"{name}={encode_value(value)}"]
    seen: set[str] = set()
    for attribute in attributes:
        rendered = str(attribute)
        if rendered not in seen:
            seen.add(rendered)
            parts.append(rendered)
    return SEGMENT_SEPARATOR.join(parts)


@dataclass(frozen=True, slots=True)
class SetCookie:
    """A ``Set-Cookie`` directive attached to a Response."""

    name: str
    value: str
    attributes: tuple[CookieAttribute, ...] = ()

    def __post_init__(self) -> None:
        # Plain ValueError, not CookieError: the pipeline answers it with 500
        if not _TOKEN_RE.fullmatch(self.name):
            msg = f"Invalid cookie name {self.name!r}"
            raise ValueError(msg)

    @property
    def http_only(self) -> bool:
        return CookieFlag.HTTP_ONLY in self.attributes

    @property
    def secure(self) -> bool:
        return CookieFlag.SECURE in self.attributes

    @property
    def max_age(self) -> int | None:
        for attribute in self.attributes:
            if isinstance(attribute, MaxAge):
                return attribute.seconds
        return None

    def to_header_value(self) -> str:
        """Serialize to a ``Set-Cookie`` header value string."""
        return serialize_cookie(self.name, self.value, self.attributes)


def parse_set_cookie(header: str) -> SetCookie:
    """Parse a ``Set-Cookie`` header value back into a ``SetCookie``.

    The client side of the exchange, used by the test client's cookie
    jar.  Attribute names are matched case-insensitively (``HTTPOnly``
    and ``HttpOnly`` are the same); attributes crumbs does not model,
    such as ``Path``, are skipped.

    Raises:
        CookieDecodeError: The leading ``name=value`` pair is malformed.
    """
    first, *rest = [part.strip() for part in header.split(";")]
    name, sep, value = first.partition("=")
    if not sep or not name:
        raise CookieDecodeError(first, "missing '='")

    attributes: list[CookieAttribute] = []
    for part in rest:
        key, _, arg = part.partition("=")
        key = key.strip().lower()
        if key == "httponly":
            attributes.append(CookieFlag.HTTP_ONLY)
        elif key == "secure":
            attributes.append(CookieFlag.SECURE)
        elif key == "max-age" and arg.strip().isdigit():
            attributes.append(MaxAge(int(arg.strip())))
    return SetCookie(name=name, value=decode_value(value, first), attributes=tuple(attributes))
