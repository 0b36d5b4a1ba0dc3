"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from crumbs.errors import ConfigurationError

# Static assets shipped with the package
DEFAULT_PUBLIC_DIR = Path(__file__).parent / "public"

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


def _env_bool(environ: Mapping[str, str], key: str, default: bool) -> bool:
    raw = environ.get(key)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    msg = f"{key} must be a boolean (1/0, true/false, yes/no, on/off), got {raw!r}"
    raise ConfigurationError(msg)


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        msg = f"{key} must be an integer, got {raw!r}"
        raise ConfigurationError(msg) from None


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=8080, log_cookies=False)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False

    # Reload (development mode, requires debug=True)
    reload_include: tuple[str, ...] = ()  # Extra extensions to watch (e.g. ".html", ".css")
    reload_dirs: tuple[str, ...] = ()  # Extra directories to watch alongside cwd

    # Static assets (index.html, app.css, app.js)
    public_dir: str | Path = DEFAULT_PUBLIC_DIR

    # Logging
    log_cookies: bool = True  # Log every inbound Cookie header before dispatch
    log_level: str = "info"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AppConfig":
        """Build a config from ``CRUMBS_*`` environment variables.

        Unset variables keep their defaults.  Recognized keys:
        ``CRUMBS_HOST``, ``CRUMBS_PORT``, ``CRUMBS_DEBUG``,
        ``CRUMBS_PUBLIC_DIR``, ``CRUMBS_LOG_COOKIES``, ``CRUMBS_LOG_LEVEL``.

        Raises:
            ConfigurationError: A value cannot be converted.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            host=env.get("CRUMBS_HOST", defaults.host),
            port=_env_int(env, "CRUMBS_PORT", defaults.port),
            debug=_env_bool(env, "CRUMBS_DEBUG", defaults.debug),
            public_dir=env.get("CRUMBS_PUBLIC_DIR", defaults.public_dir),
            log_cookies=_env_bool(env, "CRUMBS_LOG_COOKIES", defaults.log_cookies),
            log_level=env.get("CRUMBS_LOG_LEVEL", defaults.log_level).lower(),
        )

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if any field is out of range."""
        if not 0 <= self.port <= 65535:
            msg = f"port must be between 0 and 65535, got {self.port}"
            raise ConfigurationError(msg)
        if self.log_level.lower() not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}; got {self.log_level!r}"
            raise ConfigurationError(msg)
