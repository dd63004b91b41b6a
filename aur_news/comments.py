"""Scraping of AUR package comments."""

from __future__ import annotations

import logging
from typing import List, Optional
from urllib.parse import quote, urljoin

import requests
from bs4 import BeautifulSoup

from .models import Comment
from .transport import DEFAULT_TIMEOUT, request_text

logger = logging.getLogger(__name__)

DEFAULT_AUR_URL = "https://aur.archlinux.org/"

TITLE_SELECTOR = "div.comments h4.comment-header"
CONTENT_SELECTOR = "div.comments div.article-content"


def comments_url(pkg: str, aur_url: str = DEFAULT_AUR_URL) -> str:
    """Build the URL of the page listing every comment on ``pkg``."""
    return urljoin(aur_url, f"packages/{quote(pkg)}/comments?&PP=1000000")


def parse_comments(html: str) -> List[Comment]:
    """Extract comments from an AUR package page.

    Headers and bodies are paired in document order; a trailing header or body
    without a partner is dropped.
    """
    soup = BeautifulSoup(html, "html.parser")
    titles = soup.select(TITLE_SELECTOR)
    bodies = soup.select(CONTENT_SELECTOR)
    if len(titles) != len(bodies):
        logger.debug(
            "Mismatched comment markup: %d headers, %d bodies",
            len(titles),
            len(bodies),
        )

    return [
        Comment(title=title.get_text().strip(), content=body.get_text().strip())
        for title, body in zip(titles, bodies)
    ]


def fetch_comments(
    pkg: str,
    aur_url: str = DEFAULT_AUR_URL,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[Comment]:
    """Download and parse the comments of an AUR package."""
    url = comments_url(pkg, aur_url)
    logger.info("Fetching comments for '%s' (%s)", pkg, url)
    comments = parse_comments(request_text(url, session=session, timeout=timeout))
    logger.info("Collected %d comments for '%s'", len(comments), pkg)
    return comments
