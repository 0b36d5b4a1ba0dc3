"""Test utilities for crumbs applications.

Provides an in-process test client with a cookie jar and ``Set-Cookie``
assertions::

    from crumbs.testing import TestClient, assert_set_cookie
"""

from crumbs.testing.assertions import assert_no_set_cookie, assert_set_cookie, set_cookies
from crumbs.testing.client import TestClient

__all__ = [
    "TestClient",
    "assert_no_set_cookie",
    "assert_set_cookie",
    "set_cookies",
]
