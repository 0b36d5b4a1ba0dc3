"""Client-held session counter.

The counter lives entirely in the ``count`` cookie.  The server reads the
value the client presents, computes the next one, and sends it back in a
``Set-Cookie`` directive; nothing is stored between requests.

A missing cookie counts as ``0``.  A value that is not a base-10 integer
raises ``InvalidCounter``, which the request pipeline answers with 400.
"""

import re
from collections.abc import Mapping

from crumbs.errors import InvalidCounter

COUNTER_COOKIE = "count"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def read_counter(cookies: Mapping[str, str], name: str = COUNTER_COOKIE) -> int:
    """Return the counter value presented by the client."""
    raw = cookies.get(name)
    if raw is None:
        return 0
    if not _INTEGER_RE.fullmatch(raw):
        raise InvalidCounter(name, raw)
    try:
        return int(raw)
    except ValueError:
        # Digit strings past sys.get_int_max_str_digits()
        raise InvalidCounter(name, raw) from None


def reset_counter() -> int:
    return 0


def increment_counter(cookies: Mapping[str, str], name: str = COUNTER_COOKIE) -> int:
    return read_counter(cookies, name) + 1


def decrement_counter(cookies: Mapping[str, str], name: str = COUNTER_COOKIE) -> int:
    return read_counter(cookies, name) - 1
