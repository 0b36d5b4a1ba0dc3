"""Crumbs CLI — cookie demo server and route listing.

Entry point registered as ``crumbs`` in ``pyproject.toml``::

    [project.scripts]
    crumbs = "crumbs.cli:main"
"""

import argparse
import sys

DEFAULT_APP = "crumbs.demo:create_app"


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``crumbs`` command."""
    parser = argparse.ArgumentParser(
        prog="crumbs",
        description="Crumbs — a cookie session demo server.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- crumbs run -------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the server")
    run_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--public-dir",
        default=None,
        help="Directory holding index.html, app.css and app.js",
    )
    run_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (auto-reload, tracebacks in 500 responses)",
    )
    run_parser.add_argument(
        "--no-log-cookies",
        action="store_true",
        help="Do not log inbound cookies",
    )
    run_parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (debug, info, warning, error, critical)",
    )

    # -- crumbs routes ----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from crumbs.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from crumbs.cli._routes import run_routes

        run_routes(args)
