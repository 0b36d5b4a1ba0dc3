"""Crumbs — cookie-based session state, served over ASGI.

A small demo server: a counter that lives in a ``count`` cookie, plus
examples of the ``HttpOnly``, ``Secure`` and ``Max-Age`` attributes.
The server keeps no state between requests.

Basic usage::

    from crumbs.demo import create_app

    app = create_app()
    app.run()  # http://127.0.0.1:3000

Custom routes::

    from crumbs import App, CookieFlag, Response

    app = App()

    @app.route("/hello")
    def hello(request):
        return Response("hi").with_cookie("seen", "1", CookieFlag.HTTP_ONLY)
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "BadRequest",
    "ConfigurationError",
    "CookieDecodeError",
    "CookieError",
    "CookieFlag",
    "CrumbsError",
    "HTTPError",
    "MaxAge",
    "NotFound",
    "Request",
    "Response",
    "create_app",
    "parse_cookies",
    "serialize_cookie",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumbs`` fast while providing a clean top-level API.
    """
    if name == "App":
        from crumbs.app import App

        return App

    if name == "AppConfig":
        from crumbs.config import AppConfig

        return AppConfig

    if name == "create_app":
        from crumbs.demo import create_app

        return create_app

    if name == "Request":
        from crumbs.http.request import Request

        return Request

    if name == "Response":
        from crumbs.http.response import Response

        return Response

    if name in ("CookieFlag", "MaxAge", "parse_cookies", "serialize_cookie"):
        from crumbs.http import cookies as _cookies

        return getattr(_cookies, name)

    if name in (
        "BadRequest",
        "ConfigurationError",
        "CookieDecodeError",
        "CookieError",
        "CrumbsError",
        "HTTPError",
        "NotFound",
    ):
        from crumbs import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
