"""Server startup.

Starts a pounce ASGI server with the live crumbs App object.
Single worker; reload is enabled in debug mode.
"""

import logging

logger = logging.getLogger("crumbs.server")


def run_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = False,
    reload_include: tuple[str, ...] = (),
    reload_dirs: tuple[str, ...] = (),
    app_path: str | None = None,
) -> None:
    """Start a pounce server with the given crumbs App.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but crumbs has a live ``App`` object. We use ``pounce.Server``
    directly with the ASGI callable.

    Args:
        app: ASGI callable (crumbs App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes.
        reload_include: Extra file extensions to watch when reload is
            active (e.g. ``(".html", ".css")``).
        reload_dirs: Extra directories to watch alongside cwd.
        app_path: Optional ``"module:attribute"`` import string.  When
            provided, pounce reimports the app on each reload cycle.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        reload_include=reload_include,
        reload_dirs=reload_dirs,
    )
    server = Server(config, app, app_path=app_path)
    logger.info("Listening on port %d", port)
    server.run()
