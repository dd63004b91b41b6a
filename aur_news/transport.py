"""HTTP helpers shared by the news and comments fetchers."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .errors import RequestError, ResponseError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def _get(
    url: str, session: Optional[requests.Session], timeout: float
) -> requests.Response:
    client = session if session is not None else requests
    logger.debug("GET %s (timeout %.1fs)", url, timeout)
    try:
        response = client.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise RequestError(url, exc) from exc

    if not 200 <= response.status_code < 300:
        raise ResponseError(url, response.status_code)
    return response


def request_text(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Return the decoded body of a successful GET request."""
    return _get(url, session, timeout).text


def request_bytes(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> bytes:
    """Return the raw body of a successful GET request."""
    return _get(url, session, timeout).content
