"""Pony template entities -- parsed body tokens and the lazily-loaded template."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, PrivateAttr

PONY_EXTENSION = '.pony'


class LiteralText(BaseModel):
    """Verbatim art text."""

    model_config = ConfigDict(frozen=True)

    text: str


class Stem(BaseModel):
    """Directional marker drawn from ``\\`` and ``/``; rendered padded by one space each side."""

    model_config = ConfigDict(frozen=True)

    marker: str

    def render(self) -> str:
        return f' {self.marker} '


class BalloonSlot(BaseModel):
    """Insertion point for the balloon. The raw slot text is kept for diagnostics only."""

    model_config = ConfigDict(frozen=True)

    raw: str = ''


Token = LiteralText | Stem | BalloonSlot


class ParsedPony(BaseModel):
    """Result of parsing a template: ordered metadata pairs plus body tokens.

    Metadata keys and values are kept exactly as written, surrounding
    whitespace included.
    """

    metadata: list[tuple[str, str]] = []
    body: list[Token] = []

    @property
    def balloon_slot_count(self) -> int:
        return sum(1 for token in self.body if isinstance(token, BalloonSlot))

    def metadata_dict(self) -> dict[str, str]:
        """Metadata as a plain mapping; on duplicate keys the last value wins."""
        return dict(self.metadata)


def pony_name(path: Path, extension: str = PONY_EXTENSION) -> str | None:
    """Return the pony name for *path*, or None when the extension does not match."""
    if path.suffix != extension or not path.stem:
        return None
    return path.stem


class Pony(BaseModel):
    """A pony template on disk.

    The raw text is absent until first requested through :meth:`content` and
    is cached for the lifetime of the instance. Instances are not meant to be
    shared between concurrent renders.
    """

    path: Path
    name: str

    _content: str | None = PrivateAttr(default=None)

    @classmethod
    def from_path(cls, path: Path | str, extension: str = PONY_EXTENSION) -> Pony | None:
        path = Path(path)
        name = pony_name(path, extension)
        if name is None:
            return None
        return cls(path=path, name=name)

    @property
    def is_loaded(self) -> bool:
        return self._content is not None

    def content(self, reader: Callable[[Path], str]) -> str:
        """Return the template text, loading it with *reader* on first access."""
        if self._content is None:
            self._content = reader(self.path)
        return self._content
