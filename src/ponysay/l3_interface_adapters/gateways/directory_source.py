"""Gateway: directory-backed file source -- implements PonySource and QuoteSource."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ponysay.l1_entities.errors import PonyReadError

log = logging.getLogger('ponysay.source')


def _canonical(path: Path) -> Path:
    return Path(os.path.abspath(path))


class DirectorySource:
    """Lists regular files in a sequence of directories and reads them as UTF-8.

    Paths are handed out absolute and normalized, so the same file always
    compares equal however it was named. Missing directories are skipped
    silently; unreadable ones with a warning.
    """

    def __init__(self, directories: list[Path | str]) -> None:
        self.directories = [Path(d) for d in directories]

    def discover(self) -> list[Path]:
        found: list[Path] = []
        for directory in self.directories:
            if not directory.is_dir():
                continue
            try:
                entries = sorted(_canonical(directory).iterdir())
            except OSError as e:
                log.warning('cannot list %s: %s', directory, e)
                continue
            found.extend(p for p in entries if p.is_file())
        return found

    def resolve(self, path: Path) -> Path | None:
        if not path.is_file():
            return None
        return _canonical(path)

    def read(self, path: Path) -> str:
        try:
            return path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise PonyReadError(path, str(e)) from e
