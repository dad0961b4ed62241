"""Port: quote source."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class QuoteSource(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Discovers quote files and reads their text."""

    def discover(self) -> list[Path]:
        ...

    def read(self, path: Path) -> str:
        ...
