"""Use case: pick one pony under a set of constraints."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from pathlib import Path

from ponysay.l1_entities.constraint import ByPath, Constraint, matches
from ponysay.l1_entities.errors import NoMatchingPonyError, NoPoniesAvailableError
from ponysay.l1_entities.pony import PONY_EXTENSION, Pony
from ponysay.l2_use_cases.ports.pony_source import PonySource

log = logging.getLogger('ponysay.select')


def discover_ponies(paths: Iterable[Path], extension: str = PONY_EXTENSION) -> list[Pony]:
    """Valid ponies among *paths*; paths with the wrong extension are skipped."""
    return [pony for pony in (Pony.from_path(p, extension) for p in paths) if pony is not None]


def resolve_path_constraint(
    constraint: ByPath,
    source: PonySource,
    extension: str = PONY_EXTENSION,
) -> Pony | None:
    """The pony a ByPath constraint names, or None when it is not an existing template file."""
    path = source.resolve(constraint.path)
    if path is None:
        return None
    return Pony.from_path(path, extension)


def effective_constraints(
    constraints: list[Constraint],
    source: PonySource,
    extension: str = PONY_EXTENSION,
) -> list[Constraint]:
    """Constraints as selection sees them.

    ByPath constraints are rewritten to the source's canonical path; those
    that do not name a template are dropped as if they had never been given.
    """
    effective: list[Constraint] = []
    for constraint in constraints:
        if isinstance(constraint, ByPath):
            pony = resolve_path_constraint(constraint, source, extension)
            if pony is None:
                log.info('ignoring %s: not a %s template', constraint, extension)
                continue
            effective.append(ByPath(path=pony.path))
        else:
            effective.append(constraint)
    return effective


def candidate_ponies(
    discovered: list[Pony],
    constraints: list[Constraint],
    extension: str = PONY_EXTENSION,
) -> list[Pony]:
    """Filter step of selection, over already-effective *constraints*.

    Without constraints every discovered pony is a candidate. Otherwise the
    candidates are the discovered ponies matching any constraint, plus the
    ponies named by ByPath constraints that discovery did not find. Each
    path is counted once.
    """
    if not constraints:
        return list(discovered)

    candidates: dict[Path, Pony] = {
        pony.path: pony for pony in discovered if any(matches(pony, c) for c in constraints)
    }
    for constraint in constraints:
        if isinstance(constraint, ByPath) and constraint.path not in candidates:
            pony = Pony.from_path(constraint.path, extension)
            if pony is not None:
                candidates[pony.path] = pony
    return list(candidates.values())


class SelectPonyUseCase:
    """Filter-then-choose over the ponies a PonySource discovers."""

    def __init__(self, source: PonySource, rng: random.Random, extension: str = PONY_EXTENSION) -> None:
        self._source = source
        self._rng = rng
        self._extension = extension

    def execute(self, constraints: list[Constraint] | None = None) -> Pony:
        """Return one pony. Raises NoPoniesAvailableError / NoMatchingPonyError."""
        effective = effective_constraints(list(constraints or []), self._source, self._extension)
        discovered = discover_ponies(self._source.discover(), self._extension)
        candidates = candidate_ponies(discovered, effective, self._extension)
        log.debug('%d ponies discovered, %d candidates', len(discovered), len(candidates))

        if not candidates:
            if not discovered:
                raise NoPoniesAvailableError()
            raise NoMatchingPonyError(effective)
        if len(candidates) == 1:
            chosen = candidates[0]
        else:
            chosen = self._rng.choice(candidates)
        log.debug('selected %s (%s)', chosen.name, chosen.path)
        return chosen
