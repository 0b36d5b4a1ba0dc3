"""App import resolution — resolves ``"module:attribute"`` strings to App instances.

Shared utility used by ``crumbs run`` and ``crumbs routes``.
"""

import importlib

from crumbs.app import App
from crumbs.config import AppConfig


def resolve_app(import_string: str, config: AppConfig | None = None) -> App:
    """Resolve an import string to a crumbs App instance.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"app"`` (e.g. ``"myapp"`` resolves to
    ``myapp.app``).

    If the resolved object is callable and not an App instance, it is
    treated as a factory and called with *config* (or with no arguments
    when *config* is ``None``).

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a crumbs ``App`` or
            a factory producing one.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, App):
        try:
            obj = obj(config) if config is not None else obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, App):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a crumbs.App instance"
        raise TypeError(msg)

    return obj
