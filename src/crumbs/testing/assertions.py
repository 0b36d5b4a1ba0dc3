"""Cookie assertion helpers for crumbs tests.

Each assertion inspects the ``Set-Cookie`` headers of a response and
produces a clear error message on failure.
"""

from crumbs.http.cookies import CookieAttribute, SetCookie, parse_set_cookie
from crumbs.http.response import Response


def set_cookies(response: Response) -> dict[str, SetCookie]:
    """Return the response's ``Set-Cookie`` directives keyed by name."""
    directives = (parse_set_cookie(h) for h in response.header_list("set-cookie"))
    return {cookie.name: cookie for cookie in directives}


def assert_set_cookie(
    response: Response,
    name: str,
    value: str | None = None,
    *attributes: CookieAttribute,
) -> SetCookie:
    """Assert the response sets cookie *name* (optionally to *value*).

    Every attribute in *attributes* must be present on the directive.
    Returns the parsed directive for further checks.
    """
    cookies = set_cookies(response)
    assert name in cookies, (
        f"Response does not set cookie {name!r}.\n"
        f"Set-Cookie headers: {response.header_list('set-cookie')}"
    )
    cookie = cookies[name]
    if value is not None:
        assert cookie.value == value, (
            f"Cookie {name!r} is {cookie.value!r}, expected {value!r}"
        )
    for attribute in attributes:
        assert attribute in cookie.attributes, (
            f"Cookie {name!r} is missing attribute {attribute}.\n"
            f"Set-Cookie header: {cookie.to_header_value()}"
        )
    return cookie


def assert_no_set_cookie(response: Response) -> None:
    """Assert the response carries no ``Set-Cookie`` header at all."""
    headers = response.header_list("set-cookie")
    assert not headers, f"Response unexpectedly sets cookies: {headers}"
