"""Shared fixtures: a throwaway public directory and a demo app serving it."""

from pathlib import Path

import pytest

from crumbs.app import App
from crumbs.config import AppConfig
from crumbs.demo import create_app

INDEX_HTML = "<!DOCTYPE html><html><body><h1>Cookie Sessions</h1></body></html>"
APP_CSS = "body { color: red; }"
APP_JS = "console.log(document.cookie);"


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    """A public directory holding index.html, app.css and app.js."""
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text(INDEX_HTML)
    (public / "app.css").write_text(APP_CSS)
    (public / "app.js").write_text(APP_JS)
    return public


@pytest.fixture
def demo_app(public_dir: Path) -> App:
    """The demo route table serving the fixture assets."""
    return create_app(AppConfig(public_dir=public_dir, log_cookies=False))
