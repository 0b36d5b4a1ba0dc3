"""Middleware — request/response pipeline hooks.

Built-ins:

- ``CookieLogger``: writes every inbound cookie jar to the
  ``crumbs.cookies`` logger before dispatch.
"""

from crumbs.middleware.cookie_log import CookieLogger
from crumbs.middleware.protocol import Middleware, Next

__all__ = ["CookieLogger", "Middleware", "Next"]
