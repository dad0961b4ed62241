"""Domain error types."""

from __future__ import annotations

from pathlib import Path


class PonysayError(Exception):
    """Base class for every failure that aborts a render."""


class PonyParseError(PonysayError):
    """Raised when a pony template is structurally malformed."""

    def __init__(self, message: str, position: int, source: Path | str | None = None) -> None:
        self.message = message
        self.position = position
        self.source = source
        where = f'{source}: ' if source is not None else ''
        super().__init__(f'{where}{message} (at offset {position})')


class PonyReadError(PonysayError):
    """Raised when a pony or quote file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f'Unable to read {path}: {reason}')


class NoPoniesAvailableError(PonysayError):
    """Raised when no pony templates were discovered at all."""

    def __init__(self) -> None:
        super().__init__('No ponies available')


class NoMatchingPonyError(PonysayError):
    """Raised when ponies exist but none satisfies the constraints."""

    def __init__(self, constraints: list) -> None:
        self.constraints = constraints
        super().__init__("Couldn't find any pony matching " + ', '.join(str(c) for c in constraints))


class NoQuotesAvailableError(PonysayError):
    """Raised when a random quote is requested but no quote files exist."""

    def __init__(self) -> None:
        super().__init__('No quotes available')
