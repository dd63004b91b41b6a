"""Shared data models for aur_news."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Text:
    """Plain prose from a news description."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class Code:
    """Contents of a ``<code>`` span."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class Url:
    """A hyperlink: the ``href`` target and the visible label."""

    target: str
    label: str

    def render(self) -> str:
        return f"{self.label} ({self.target})"


NewsItem = Union[Text, Code, Url]


@dataclass(frozen=True)
class Comment:
    """A comment on an AUR package page."""

    # Includes the author and the date.
    title: str
    content: str
