"""Use case: pick a random quote and the pony it belongs to."""

from __future__ import annotations

import logging
import random
from pathlib import Path

from ponysay.l1_entities.constraint import ByName
from ponysay.l1_entities.errors import NoQuotesAvailableError
from ponysay.l1_entities.quote import Quote
from ponysay.l2_use_cases.ports.quote_source import QuoteSource

log = logging.getLogger('ponysay.quote')

NAME_SEPARATOR = '+'


def quote_pony_names(path: Path) -> list[str]:
    """Pony names encoded in a quote file stem, e.g. ``applejack+rarity.3`` -> applejack, rarity."""
    return [name for name in path.stem.split(NAME_SEPARATOR) if name]


def pick_pony_name(path: Path, rng: random.Random) -> str | None:
    """One name from the quote file's stem, chosen uniformly; None when the stem names nobody."""
    names = quote_pony_names(path)
    if not names:
        return None
    return rng.choice(names)


class PickQuoteUseCase:
    def __init__(self, source: QuoteSource, rng: random.Random) -> None:
        self._source = source
        self._rng = rng

    def execute(self) -> Quote:
        """Choose a quote file uniformly. Raises NoQuotesAvailableError when there is none."""
        paths = self._source.discover()
        if not paths:
            raise NoQuotesAvailableError()
        path = self._rng.choice(paths)
        name = pick_pony_name(path, self._rng)
        log.debug('quote %s -> pony %s', path, name)
        return Quote(
            text=self._source.read(path),
            source=path,
            constraint=ByName(name=name) if name is not None else None,
        )
