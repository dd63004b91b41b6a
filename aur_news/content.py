"""Best-effort tokenizer for the HTML found in news descriptions.

Only ``<p>``, ``<a>`` and ``<code>`` carry meaning here; every other tag is
dropped. Malformed markup never raises, it just yields shorter tokens.
"""

from __future__ import annotations

import copy
from typing import Iterable, Iterator

from .entities import decode_entities
from .models import Code, NewsItem, Text, Url

CODE_OPEN = "<code>"
PARAGRAPH_CLOSE = "</p>"
ANCHOR_OPEN = "<a"
HREF = 'href="'


def _find(text: str, needle: str, start: int) -> int:
    """Index of ``needle`` at or after ``start``, or ``len(text)``."""
    index = text.find(needle, start)
    return len(text) if index == -1 else index


def _skip_past(text: str, needle: str, start: int) -> int:
    """Index just after the next ``needle``, or ``len(text)``."""
    index = text.find(needle, start)
    return len(text) if index == -1 else index + len(needle)


class Content:
    """Lazy iterator of :data:`NewsItem` tokens over a news description.

    The source string is referenced, not copied; ``position`` is the offset of
    the next unread character. Iterating consumes the tokenizer, so ask the
    owning :class:`~aur_news.news.NewsEntry` for a new one to start over.
    ``str()`` renders the remaining tokens without advancing.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self.position = 0

    def __iter__(self) -> Iterator[NewsItem]:
        return self

    def __next__(self) -> NewsItem:
        text = self._text
        while True:
            pos = self.position
            if pos >= len(text):
                raise StopIteration

            if text.startswith(CODE_OPEN, pos):
                start = pos + len(CODE_OPEN)
                code = text[start:_find(text, "<", start)]
                self.position = _skip_past(text, ">", start)
                return Code(decode_entities(code))

            if text.startswith(PARAGRAPH_CLOSE, pos):
                self.position = pos + len(PARAGRAPH_CLOSE)
                return Text("\n")

            if text.startswith(ANCHOR_OPEN, pos):
                href = text.find(HREF, pos)
                link_start = pos if href == -1 else href + len(HREF)
                link = text[link_start:_find(text, '"', link_start)]
                label_start = _skip_past(text, ">", pos)
                label = text[label_start:_find(text, "<", label_start)]
                self.position = _skip_past(text, ">", label_start)
                return Url(decode_entities(link), decode_entities(label))

            if text.startswith("<", pos):
                # Unknown tag: drop it and look again.
                self.position = _skip_past(text, ">", pos)
                continue

            end = _find(text, "<", pos)
            self.position = end
            return Text(decode_entities(text[pos:end]))

    def __copy__(self) -> "Content":
        clone = Content(self._text)
        clone.position = self.position
        return clone

    def __str__(self) -> str:
        return render_tokens(copy.copy(self))

    def __repr__(self) -> str:
        return f"Content(position={self.position}, length={len(self._text)})"


def render_tokens(tokens: Iterable[NewsItem]) -> str:
    """Join tokens into display text; links become ``label (target)``."""
    return "".join(token.render() for token in tokens)
