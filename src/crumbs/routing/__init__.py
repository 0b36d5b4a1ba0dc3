"""Routing — exact-path route table.

Routes are registered during setup and compiled into an immutable
lookup structure when the app freezes.
"""

from crumbs.routing.route import Route, RouteMatch
from crumbs.routing.router import Router

__all__ = ["Route", "RouteMatch", "Router"]
