"""Quote entity."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from ponysay.l1_entities.constraint import ByName


class Quote(BaseModel):
    """Text for the balloon, optionally tied to the pony that said it."""

    text: str
    source: Path | None = None
    constraint: ByName | None = None
