"""Configuration Pydantic models -- pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class BalloonConfig(BaseModel):
    wrap_width: int = Field(ge=1)


class LibraryConfig(BaseModel):
    pony_dirs: list[str]
    quote_dirs: list[str]
    extension: str = '.pony'


class AppConfig(BaseModel):
    balloon: BalloonConfig
    library: LibraryConfig
