"""Splice a rendered balloon into parsed pony tokens."""

from __future__ import annotations

from collections.abc import Iterable

from ponysay.l1_entities.pony import BalloonSlot, LiteralText, Stem, Token


def composite(tokens: Iterable[Token], balloon: str) -> str:
    """Concatenate *tokens* in order, replacing every balloon slot with *balloon*."""
    parts: list[str] = []
    for token in tokens:
        if isinstance(token, LiteralText):
            parts.append(token.text)
        elif isinstance(token, Stem):
            parts.append(token.render())
        elif isinstance(token, BalloonSlot):
            parts.append(balloon)
        else:
            raise TypeError(f'Unknown token: {token!r}')
    return ''.join(parts)
