"""Use case: list pony names."""

from __future__ import annotations

from ponysay.l1_entities.pony import PONY_EXTENSION
from ponysay.l2_use_cases.ports.pony_source import PonySource
from ponysay.l2_use_cases.select_pony_use_case import discover_ponies


class ListPoniesUseCase:
    def __init__(self, source: PonySource, extension: str = PONY_EXTENSION) -> None:
        self._source = source
        self._extension = extension

    def execute(self) -> list[str]:
        """Sorted, de-duplicated pony names."""
        return sorted({pony.name for pony in discover_ponies(self._source.discover(), self._extension)})
