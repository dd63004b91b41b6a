"""HTML character entity decoding."""

from __future__ import annotations

import logging
import re
from html.entities import html5

logger = logging.getLogger(__name__)

_ENTITY_RE = re.compile(
    r"&(?:#([0-9]+)|#[xX]([0-9a-fA-F]+)|([A-Za-z][A-Za-z0-9]*));"
)


class EntityDecodeError(ValueError):
    """Raised by :func:`decode_html` for a malformed character reference."""


def _resolve(match: re.Match) -> str:
    decimal, hexadecimal, name = match.groups()
    if name is not None:
        try:
            return html5[name + ";"]
        except KeyError:
            raise EntityDecodeError(f"unknown entity '&{name};'") from None

    digits = (decimal if decimal is not None else hexadecimal).lstrip("0")
    # Anything longer is past U+10FFFF in either base.
    if len(digits) > (7 if decimal is not None else 6):
        raise EntityDecodeError(f"invalid character reference '{match.group(0)}'")
    codepoint = int(decimal, 10) if decimal is not None else int(hexadecimal, 16)
    if codepoint == 0 or codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
        raise EntityDecodeError(f"invalid character reference '{match.group(0)}'")
    return chr(codepoint)


def decode_html(text: str) -> str:
    """Decode every character reference in ``text``.

    Every ``&`` must start a well-formed named (``&amp;``) or numeric
    (``&#38;``, ``&#x26;``) reference terminated by ``;``. Anything else
    raises :class:`EntityDecodeError`.
    """
    if "&" not in text:
        return text

    parts = []
    pos = 0
    while True:
        amp = text.find("&", pos)
        if amp == -1:
            parts.append(text[pos:])
            break
        parts.append(text[pos:amp])
        match = _ENTITY_RE.match(text, amp)
        if match is None:
            raise EntityDecodeError(f"malformed entity at offset {amp}")
        parts.append(_resolve(match))
        pos = match.end()

    return "".join(parts)


def decode_entities(text: str) -> str:
    """Decode character references, returning ``text`` unchanged on failure."""
    try:
        return decode_html(text)
    except EntityDecodeError as exc:
        logger.debug("Keeping undecoded text (%s): %r", exc, text)
        return text
