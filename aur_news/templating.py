"""Jinja2 environment for aur_news templates."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

_ENV: Environment | None = None

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


def _render_content(entry) -> str:
    """Render the description of a news entry as plain text."""
    return str(entry.content())


def get_environment() -> Environment:
    """Return a cached Jinja environment configured for package templates."""
    global _ENV
    if _ENV is None:
        _ENV = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        _ENV.filters["render_content"] = _render_content
    return _ENV
