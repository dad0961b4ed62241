"""Port: pony template source."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class PonySource(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Discovers template paths and reads their text."""

    def discover(self) -> list[Path]:
        """Every candidate path in the pony directories (extension not yet checked), in canonical form."""
        ...

    def resolve(self, path: Path) -> Path | None:
        """Canonical form of *path* when it names an existing file, else None."""
        ...

    def read(self, path: Path) -> str:
        """Read a template. Raises PonyReadError on I/O failure."""
        ...
