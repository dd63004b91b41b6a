"""Exception hierarchy for aur_news.

Only the network-facing helpers raise these. Tokenizing and rendering news
content never fails.
"""

from __future__ import annotations


class AurError(Exception):
    """Base exception for all aur_news errors."""


class RequestError(AurError):
    """Raised when an HTTP request could not be completed."""

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(f"{url}: {cause}")
        self.url = url
        self.cause = cause


class ResponseError(AurError):
    """Raised when the server answers with a non-success status code."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"{url}: {status_code}")
        self.url = url
        self.status_code = status_code


class FeedError(AurError):
    """Raised when a downloaded feed cannot be read as RSS/Atom."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason
