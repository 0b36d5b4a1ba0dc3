"""``crumbs run`` — start the server.

Builds an AppConfig from ``CRUMBS_*`` environment variables and CLI
flags, resolves the app, configures logging, and hands the app to the
pounce server.
"""

import argparse
import logging
import sys
from collections.abc import Mapping
from dataclasses import replace

from crumbs.cli._resolve import resolve_app
from crumbs.config import AppConfig
from crumbs.errors import ConfigurationError

logger = logging.getLogger("crumbs.cli")


def configure_logging(level: str) -> None:
    """Send crumbs log records to stderr at *level*."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        stream=sys.stderr,
    )


def build_config(args: argparse.Namespace, environ: Mapping[str, str] | None = None) -> AppConfig:
    """Merge environment configuration with CLI overrides (CLI wins)."""
    config = AppConfig.from_env(environ)
    overrides: dict[str, object] = {}
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.public_dir:
        overrides["public_dir"] = args.public_dir
    if args.debug:
        overrides["debug"] = True
    if args.no_log_cookies:
        overrides["log_cookies"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level.lower()
    return replace(config, **overrides)


def run_server(args: argparse.Namespace) -> None:
    """Start the crumbs server.

    Factories (like the default ``crumbs.demo:create_app``) receive the
    merged config.  Ready-made App instances keep their own config;
    ``--host`` and ``--port`` still override the bind address.
    """
    try:
        config = build_config(args)
        config.validate()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    configure_logging(config.log_level)

    try:
        app = resolve_app(args.app, config)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    host = args.host or app.config.host
    port = args.port if args.port is not None else app.config.port

    try:
        app._ensure_frozen()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logger.debug("Serving %s from %s", args.app, app.assets.directory)

    from crumbs.server.serve import run_server as serve

    serve(
        app,
        host,
        port,
        reload=app.config.debug,
        reload_include=app.config.reload_include,
        reload_dirs=app.config.reload_dirs,
        app_path=args.app,
    )
