"""Arch Linux news entries and the feed that carries them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

import feedparser
import requests

from .content import Content
from .errors import FeedError
from .transport import DEFAULT_TIMEOUT, request_bytes

logger = logging.getLogger(__name__)

DEFAULT_NEWS_URL = "https://archlinux.org/feeds/news/"

NO_DATE = "No Date"
NO_TITLE = "No Title"


@dataclass(frozen=True)
class NewsEntry:
    """A single news item.

    ``description`` holds the raw HTML of the item. Printing the entry renders
    it, or iterate :meth:`content` to format code spans and links yourself.
    """

    title: Optional[str]
    date: Optional[str]
    description: str = ""
    link: Optional[str] = None

    def content(self) -> Content:
        """Return a new tokenizer positioned at the start of the description."""
        return Content(self.description)

    @property
    def heading(self) -> str:
        return f"{self.date or NO_DATE} -- {self.title or NO_TITLE}"

    def render(self) -> str:
        return f"{self.heading}\n\n{self.content()}"

    def __str__(self) -> str:
        return self.render()


def _entry_from_feed(item) -> NewsEntry:
    description = item.get("description") or item.get("summary") or ""
    return NewsEntry(
        title=item.get("title"),
        date=item.get("published") or item.get("updated"),
        description=description,
        link=item.get("link"),
    )


def parse_news(content: Union[bytes, str], source: str = "<memory>") -> List[NewsEntry]:
    """Parse an RSS/Atom document into news entries, keeping feed order."""
    parsed = feedparser.parse(
        content, sanitize_html=False, resolve_relative_uris=False
    )
    if parsed.bozo and not parsed.entries:
        reason = str(parsed.get("bozo_exception") or "unreadable feed")
        raise FeedError(source, reason)

    entries = [_entry_from_feed(item) for item in parsed.entries]
    for entry in entries:
        if not entry.description:
            logger.debug("Entry without description in %s: %s", source, entry.title)
    return entries


def fetch_news(
    url: str = DEFAULT_NEWS_URL,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[NewsEntry]:
    """Download the news feed at ``url`` and return its entries."""
    logger.info("Fetching news feed %s", url)
    body = request_bytes(url, session=session, timeout=timeout)
    entries = parse_news(body, source=url)
    logger.info("Collected %d news entries from %s", len(entries), url)
    return entries
