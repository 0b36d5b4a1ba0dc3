"""``crumbs routes`` — list registered routes.

Resolves an import string to a crumbs App and prints every exact path
with its handler.
"""

import argparse
import sys

from crumbs.cli._resolve import resolve_app
from crumbs.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """Print a PATH / HANDLER table for the app's route table."""
    try:
        app = resolve_app(args.app)
        routes = app.routes
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str]] = []
    for route in routes:
        handler_name = getattr(route.handler, "__name__", str(route.handler))
        if route.name and route.name != handler_name:
            handler_name = f"{handler_name} ({route.name})"
        rows.append((route.path, handler_name))

    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_path}}}  {{}}"
    print(fmt.format("PATH", "HANDLER"))
    sep_len = max_path + 2 + max(len(r[1]) for r in rows)
    print("-" * min(max(sep_len, 13), 80))
    for path, handler_name in rows:
        print(fmt.format(path, handler_name))
