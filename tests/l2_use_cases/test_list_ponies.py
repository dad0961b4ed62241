"""Tests for ListPoniesUseCase."""

from __future__ import annotations

from ponysay.l2_use_cases.list_ponies_use_case import ListPoniesUseCase
from tests.conftest import FakeFileSource


class TestListPonies:
    def test_sorted_unique_names(self):
        source = FakeFileSource(
            {'/a/rarity.pony': '', '/a/applejack.pony': '', '/b/rarity.pony': '', '/b/README.md': ''}
        )
        assert ListPoniesUseCase(source).execute() == ['applejack', 'rarity']

    def test_empty(self):
        assert ListPoniesUseCase(FakeFileSource()).execute() == []
