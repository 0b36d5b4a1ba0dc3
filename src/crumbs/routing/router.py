"""Compiled router with exact path matching.

No patterns and no parameters: a request path either equals a
registered path or it does not.
"""

from crumbs.errors import ConfigurationError, NotFound
from crumbs.routing.route import Route, RouteMatch


def validate_path(path: str) -> str:
    """Check that *path* can be registered as a route.

    Raises ``ConfigurationError`` for paths that could never equal an
    ASGI request path.
    """
    if not path.startswith("/"):
        msg = f"Route path {path!r} must start with '/'."
        raise ConfigurationError(msg)
    if "?" in path or "#" in path:
        msg = (
            f"Route path {path!r} contains a query or fragment. "
            "Routes match the path only."
        )
        raise ConfigurationError(msg)
    return path


class Router:
    """Exact-path route table.

    Usage::

        router = Router()
        router.add(Route("/reset", handler))
        router.compile()
        match = router.match("/reset")
    """

    __slots__ = ("_compiled", "_table")

    def __init__(self) -> None:
        self._table: dict[str, Route] = {}
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        path = validate_path(route.path)
        if path in self._table:
            existing = self._table[path]
            msg = (
                f"Duplicate route {path!r}: already handled by "
                f"{getattr(existing.handler, '__name__', existing.handler)!r}."
            )
            raise ConfigurationError(msg)
        self._table[path] = route

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order."""
        return list(self._table.values())

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, path: str) -> RouteMatch:
        """Match a request path against the route table.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` if no route equals the path.
        """
        route = self._table.get(path)
        if route is None:
            raise NotFound(f"No route matches {path!r}")
        return RouteMatch(route=route, path=path)
