"""Rendering helpers for terminal output."""

from __future__ import annotations

from typing import Iterable

from rich.text import Text as RichText

from .models import Code, Comment, Url
from .news import NewsEntry
from .templating import get_environment

HEADING_STYLE = "bold"
CODE_STYLE = "bold cyan"
LINK_STYLE = "underline blue"


def build_news_text(entries: Iterable[NewsEntry]) -> str:
    """Render news entries as plain text using the Jinja2 template."""
    template = get_environment().get_template("news.txt.j2")
    return template.render(entries=list(entries))


def build_comments_text(comments: Iterable[Comment]) -> str:
    """Render package comments as plain text using the Jinja2 template."""
    template = get_environment().get_template("comments.txt.j2")
    return template.render(comments=list(comments))


def build_entry_rich(entry: NewsEntry) -> RichText:
    """Build styled text for one entry, highlighting code spans and links.

    The plain text of the result is identical to ``entry.render()``.
    """
    text = RichText()
    text.append(entry.heading, style=HEADING_STYLE)
    text.append("\n\n")
    for item in entry.content():
        if isinstance(item, Code):
            text.append(item.text, style=CODE_STYLE)
        elif isinstance(item, Url):
            text.append(item.label, style=LINK_STYLE)
            text.append(f" ({item.target})")
        else:
            text.append(item.text)
    return text


def build_news_rich(entries: Iterable[NewsEntry]) -> RichText:
    """Join styled entries with a blank line between them."""
    return RichText("\n\n").join(build_entry_rich(entry) for entry in entries)
