"""Cookie session demo — the crumbs route table.

Every route serves a static file.  The session routes first attach one
``Set-Cookie`` directive that changes what the client stores:

    /reset       count=0
    /increment   count=<count + 1>
    /decrement   count=<count - 1>
    /secret      message=shhh; HttpOnly
    /secure      secure-message=foobar; Secure
    /timeout     timeout=when?; Max-Age=30

Anything else is a 404.

Run:
    crumbs run
"""

from crumbs.app import App
from crumbs.config import AppConfig
from crumbs.http.cookies import CookieFlag, MaxAge
from crumbs.http.request import Request
from crumbs.http.response import Response
from crumbs.session import COUNTER_COOKIE, decrement_counter, increment_counter, reset_counter

INDEX = "index.html"


def create_app(config: AppConfig | None = None) -> App:
    """Build the demo app with its fixed route table."""
    app = App(config)

    # -- Static assets --

    @app.route("/")
    @app.route("/index.html")
    async def index(request: Request) -> Response:
        return await app.assets.respond(INDEX)

    @app.route("/app.css")
    async def stylesheet(request: Request) -> Response:
        return await app.assets.respond("app.css")

    @app.route("/app.js")
    async def script(request: Request) -> Response:
        return await app.assets.respond("app.js")

    # -- Session counter --

    @app.route("/reset")
    async def reset(request: Request) -> Response:
        page = await app.assets.respond(INDEX)
        return page.with_cookie(COUNTER_COOKIE, str(reset_counter()))

    @app.route("/increment")
    async def increment(request: Request) -> Response:
        # Read the counter before touching the disk so a bad cookie is a 400
        count = increment_counter(request.cookies)
        page = await app.assets.respond(INDEX)
        return page.with_cookie(COUNTER_COOKIE, str(count))

    @app.route("/decrement")
    async def decrement(request: Request) -> Response:
        count = decrement_counter(request.cookies)
        page = await app.assets.respond(INDEX)
        return page.with_cookie(COUNTER_COOKIE, str(count))

    # -- Cookie attributes --

    @app.route("/secret")
    async def secret(request: Request) -> Response:
        page = await app.assets.respond(INDEX)
        return page.with_cookie("message", "shhh", CookieFlag.HTTP_ONLY)

    @app.route("/secure")
    async def secure(request: Request) -> Response:
        page = await app.assets.respond(INDEX)
        return page.with_cookie("secure-message", "foobar", CookieFlag.SECURE)

    @app.route("/timeout")
    async def timeout(request: Request) -> Response:
        page = await app.assets.respond(INDEX)
        return page.with_cookie("timeout", "when?", MaxAge(30))

    return app
