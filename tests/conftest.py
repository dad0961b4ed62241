"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from ponysay.l1_entities.config import AppConfig
from ponysay.l1_entities.errors import PonyReadError
from ponysay.l4_frameworks_and_drivers.config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeFileSource:
    """In-memory PonySource / QuoteSource."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self._files = {Path(k): v for k, v in (files or {}).items()}
        self.read_calls: list[Path] = []

    def discover(self) -> list[Path]:
        return list(self._files)

    def resolve(self, path: Path) -> Path | None:
        return path if path in self._files else None

    def read(self, path: Path) -> str:
        self.read_calls.append(path)
        if path not in self._files:
            raise PonyReadError(path, 'no such file')
        return self._files[path]


SIMPLE_PONY = '$balloon$\n $\\$\nART\n'


def write_pony(directory: Path, name: str, body: str = SIMPLE_PONY) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f'{name}.pony'
    path.write_text(body, encoding='utf-8')
    return path


# --- Standard Fixtures ---


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def pony_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'ponies'
    write_pony(d, 'alice', '$$$\nNAME: Alice\n\n$$$\n$balloon$\n $\\$\nALICE\n')
    write_pony(d, 'bob', '$balloon$\n  $/$\nBOB\n')
    (d / 'notes.txt').write_text('not a pony', encoding='utf-8')
    return d


@pytest.fixture
def quote_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'quotes'
    d.mkdir()
    (d / 'alice.0').write_text('Hello', encoding='utf-8')
    return d


@pytest.fixture
def sample_config_yaml(tmp_path: Path, pony_dir: Path, quote_dir: Path) -> Path:
    content = f"""\
balloon:
  wrap_width: 40
library:
  pony_dirs:
    - "{pony_dir.as_posix()}"
  quote_dirs:
    - "{quote_dir.as_posix()}"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p
