"""Static asset store.

Reads files from the public directory and turns every read failure into
an explicit HTTP error: a missing file is ``AssetNotFound`` (404), any
other ``OSError`` is ``AssetUnavailable`` (500).  A failed read never
produces an empty 200 response.

Reads go through ``anyio.Path`` so a slow disk does not block the event
loop.
"""

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path

import anyio

from crumbs.errors import AssetNotFound, AssetUnavailable
from crumbs.http.response import Response

logger = logging.getLogger("crumbs.server")

# Fixed content types for the assets the demo serves
CONTENT_TYPES: dict[str, str] = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "text/javascript",
}


def content_type_for(name: str) -> str:
    """Return the Content-Type for an asset file name."""
    suffix = Path(name).suffix.lower()
    if suffix in CONTENT_TYPES:
        return CONTENT_TYPES[suffix]
    guessed, _ = mimetypes.guess_type(name)
    return guessed or "application/octet-stream"


@dataclass(frozen=True, slots=True)
class Asset:
    """A static file read into memory."""

    name: str
    body: bytes
    content_type: str

    def to_response(self) -> Response:
        """Wrap the asset in a 200 response."""
        return Response(body=self.body, content_type=self.content_type)


class AssetStore:
    """Reads static assets from one directory.

    Security: resolves symlinks and verifies the final path is within
    the configured directory to prevent path traversal.

    Usage::

        store = AssetStore("./public")
        asset = await store.load("index.html")
    """

    __slots__ = ("_directory",)

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory).resolve()

    @property
    def directory(self) -> Path:
        return self._directory

    def resolve(self, name: str) -> Path:
        """Return the absolute path of asset *name*.

        Raises ``AssetNotFound`` for names that escape the directory.
        """
        path = (self._directory / name.lstrip("/")).resolve()
        if not path.is_relative_to(self._directory) or path == self._directory:
            raise AssetNotFound(name)
        return path

    async def load(self, name: str) -> Asset:
        """Read asset *name* into memory.

        Raises:
            AssetNotFound: The file does not exist (or is a directory).
            AssetUnavailable: The file exists but could not be read.
        """
        path = self.resolve(name)
        try:
            body = await anyio.Path(path).read_bytes()
        except FileNotFoundError:
            raise AssetNotFound(name) from None
        except IsADirectoryError:
            raise AssetNotFound(name) from None
        except OSError as exc:
            logger.error("Cannot read asset %s: %s", path, exc)
            raise AssetUnavailable(name, exc.strerror or type(exc).__name__) from exc
        return Asset(name=name, body=body, content_type=content_type_for(name))

    async def respond(self, name: str) -> Response:
        """Load asset *name* and wrap it in a response."""
        asset = await self.load(name)
        return asset.to_response()
