"""Crumbs application class.

Mutable during setup (route registration, middleware, error handlers).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from crumbs._internal.asgi import Receive, Scope, Send
from crumbs._internal.invoke import invoke
from crumbs.assets import AssetStore
from crumbs.config import AppConfig
from crumbs.middleware.cookie_log import CookieLogger
from crumbs.middleware.protocol import Middleware
from crumbs.routing.route import Route
from crumbs.routing.router import Router
from crumbs.server.handler import handle_request

# Route handler: receives the Request, returns a Response (or str/bytes)
type Handler = Callable[..., Any]

# Error handler: receives (request, error?) and returns a response value
type ErrorHandler = Callable[..., Any]


@dataclass(slots=True)
class _PendingRoute:
    """A route waiting to be compiled."""

    path: str
    handler: Handler
    name: str | None


class App:
    """The crumbs application.

    Mutable during setup (route registration, middleware, error handlers).
    Frozen at runtime when ``app.run()`` or ``__call__()`` is first invoked.

    Usage::

        app = App(AppConfig(port=3000))

        @app.route("/reset")
        async def reset(request: Request) -> Response:
            page = await app.assets.respond("index.html")
            return page.with_cookie("count", "0")

        app.run()

    Thread safety:
        The setup phase is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check so exactly one
        thread compiles the app, even when several workers receive their
        first request at once.
    """

    __slots__ = (
        "_assets",
        "_error_handlers",
        "_freeze_lock",
        "_frozen",
        "_middleware",
        "_middleware_list",
        "_pending_routes",
        # Compiled state (populated by _freeze)
        "_router",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._pending_routes: list[_PendingRoute] = []
        self._middleware_list: list[Middleware] = []
        self._error_handlers: dict[int | type, ErrorHandler] = {}
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()
        self._assets: AssetStore = AssetStore(self.config.public_dir)

        # Compiled state, set during _freeze()
        self._router: Router | None = None
        self._middleware: tuple[Callable[..., Any], ...] = ()

    # -- Route registration --

    def route(self, path: str, *, name: str | None = None) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Paths match exactly and for every HTTP method.  Stack the
        decorator to serve one handler under several paths::

            @app.route("/")
            @app.route("/index.html")
            async def index(request): ...

        Args:
            path: Exact URL path, e.g. ``"/reset"``.
            name: Optional route name (defaults to the handler name).
        """

        def decorator(func: Handler) -> Handler:
            self._check_not_frozen()
            self._pending_routes.append(_PendingRoute(path, func, name))
            return func

        return decorator

    # -- Error handlers --

    def error(
        self,
        code_or_exception: int | type[Exception],
    ) -> Callable[[ErrorHandler], ErrorHandler]:
        """Register an error handler via decorator."""

        def decorator(func: ErrorHandler) -> ErrorHandler:
            self._check_not_frozen()
            self._error_handlers[code_or_exception] = func
            return func

        return decorator

    # -- Middleware --

    def add_middleware(self, middleware: Middleware) -> None:
        """Add a middleware to the pipeline (first added = outermost)."""
        self._check_not_frozen()
        self._middleware_list.append(middleware)

    # -- Static assets --

    @property
    def assets(self) -> AssetStore:
        """The asset store reading from ``config.public_dir``."""
        return self._assets

    # -- Lifecycle hooks --

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync startup hook via decorator.

        Hooks run in registration order during ASGI lifespan startup,
        before the server begins accepting HTTP requests.
        """
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync shutdown hook via decorator.

        Hooks run in registration order during ASGI lifespan shutdown,
        after the server stops accepting new requests.
        """
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Introspection --

    @property
    def routes(self) -> list[Route]:
        """The compiled route table (freezes the app)."""
        self._ensure_frozen()
        assert self._router is not None
        return self._router.routes

    # -- Server --

    def run(
        self,
        host: str | None = None,
        port: int | None = None,
        *,
        app_path: str | None = None,
    ) -> None:
        """Compile the app and start serving requests.

        Args:
            host: Override bind host.
            port: Override bind port.
            app_path: Import string forwarded to the server for reloads.
        """
        self._ensure_frozen()

        from crumbs.server.serve import run_server

        run_server(
            self,
            host or self.config.host,
            port if port is not None else self.config.port,
            reload=self.config.debug,
            reload_include=self.config.reload_include,
            reload_dirs=self.config.reload_dirs,
            app_path=app_path,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles lifespan scopes directly, then delegates HTTP scopes to
        the request handler pipeline.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        self._ensure_frozen()

        assert self._router is not None

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            middleware=self._middleware,
            error_handlers=self._error_handlers,
            debug=self.config.debug,
        )

    async def _handle_lifespan(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before first HTTP request), then
        runs registered startup/shutdown hooks and signals completion
        back to the server.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                    for hook in self._startup_hooks:
                        await invoke(hook)
                    await send({"type": "lifespan.startup.complete"})
                except Exception as exc:
                    await send(
                        {
                            "type": "lifespan.startup.failed",
                            "message": str(exc),
                        }
                    )
                    return

            elif msg_type == "lifespan.shutdown":
                for hook in self._shutdown_hooks:
                    await invoke(hook)
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        self.config.validate()

        # 1. Compile route table
        router = Router()
        for pending in self._pending_routes:
            name = pending.name or getattr(pending.handler, "__name__", None)
            router.add(Route(path=pending.path, handler=pending.handler, name=name))
        router.compile()
        self._router = router

        # 2. Capture middleware as immutable tuple.  Cookie logging runs
        #    outermost so it sees every request, including 404s.
        middleware_list: list[Callable[..., Any]] = list(self._middleware_list)
        if self.config.log_cookies:
            middleware_list.insert(0, CookieLogger())
        self._middleware = tuple(middleware_list)

        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes, middleware, and error handlers before calling app.run()."
            )
            raise RuntimeError(msg)
