"""Recursive-descent parser for the ``.pony`` template format.

A template is an optional metadata header followed by the art body::

    $$$
    NAME: Applejack
    KIND: pony

    $$$
    $balloon$
         $\\$
          (art...)

The header opens with a ``$$$`` line, holds ``key:value`` lines, then any
free text, and closes with another ``$$$`` line. In the body every
``$...$`` segment is either a stem (only ``\\`` and ``/``) or a balloon slot.
Everything else is literal art.
"""

from __future__ import annotations

from pathlib import Path

from ponysay.l1_entities.errors import PonyParseError
from ponysay.l1_entities.pony import BalloonSlot, LiteralText, ParsedPony, Stem, Token

METADATA_FENCE = '$$$'
STEM_CHARS = frozenset('\\/')


def parse_pony(text: str, source: Path | str | None = None) -> ParsedPony:
    """Parse a whole template. Raises PonyParseError on malformed input."""
    metadata, pos = _parse_metadata(text, 0, source)
    body = _parse_body(text, pos, source)
    return ParsedPony(metadata=metadata, body=body)


def _parse_metadata(text: str, pos: int, source: Path | str | None) -> tuple[list[tuple[str, str]], int]:
    opening = METADATA_FENCE + '\n'
    if not text.startswith(opening, pos):
        return [], pos
    pos += len(opening)

    metadata: list[tuple[str, str]] = []
    while True:
        parsed = _parse_metadata_line(text, pos)
        if parsed is None:
            break
        pair, pos = parsed
        metadata.append(pair)

    # free text between the key:value lines and the closing fence
    fence = text.find('$', pos)
    if fence == -1:
        raise PonyParseError('metadata block is never closed', pos, source)
    if text.startswith(opening, fence):
        return metadata, fence + len(opening)
    if text[fence:] == METADATA_FENCE:
        return metadata, len(text)
    raise PonyParseError(f"metadata block must be closed by a '{METADATA_FENCE}' line", fence, source)


def _parse_metadata_line(text: str, pos: int) -> tuple[tuple[str, str], int] | None:
    end = text.find('\n', pos)
    if end == -1:
        return None
    key, sep, value = text[pos:end].partition(':')
    if not sep or not key or not value:
        return None
    return (key, value), end + 1


def _parse_body(text: str, pos: int, source: Path | str | None) -> list[Token]:
    tokens: list[Token] = []
    while pos < len(text):
        if text[pos] == '$':
            token, pos = _parse_dollar_segment(text, pos, source)
        else:
            token, pos = _parse_literal(text, pos)
        tokens.append(token)
    return tokens


def _parse_literal(text: str, pos: int) -> tuple[LiteralText, int]:
    end = text.find('$', pos)
    if end == -1:
        end = len(text)
    return LiteralText(text=text[pos:end]), end


def _parse_dollar_segment(text: str, pos: int, source: Path | str | None) -> tuple[Stem | BalloonSlot, int]:
    close = text.find('$', pos + 1)
    if close == -1:
        raise PonyParseError("unterminated '$' segment", pos, source)
    content = text[pos + 1 : close]
    if not content:
        raise PonyParseError("empty '$$' segment", pos, source)
    if STEM_CHARS.issuperset(content):
        return Stem(marker=content), close + 1
    return BalloonSlot(raw=content), close + 1
