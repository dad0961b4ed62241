"""Selection constraints -- a closed set of ways to narrow the pony candidates."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from ponysay.l1_entities.pony import Pony


class ByPath(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path

    def __str__(self) -> str:
        return f'file {self.path}'


class ByName(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str

    def __str__(self) -> str:
        return f"name '{self.name}'"


Constraint = ByPath | ByName


def matches(pony: Pony, constraint: Constraint) -> bool:
    """Whether *pony* satisfies *constraint*."""
    if isinstance(constraint, ByPath):
        return pony.path == constraint.path
    if isinstance(constraint, ByName):
        return pony.name == constraint.name
    raise TypeError(f'Unknown constraint: {constraint!r}')
