"""Tests for PonysayController."""

from __future__ import annotations

import random

import pytest

from ponysay.l1_entities.constraint import ByName
from ponysay.l1_entities.errors import NoMatchingPonyError, NoQuotesAvailableError
from ponysay.l2_use_cases.list_ponies_use_case import ListPoniesUseCase
from ponysay.l2_use_cases.pick_quote_use_case import PickQuoteUseCase
from ponysay.l2_use_cases.render_pony_use_case import RenderPonyUseCase
from ponysay.l2_use_cases.select_pony_use_case import SelectPonyUseCase
from ponysay.l3_interface_adapters.controllers.ponysay_controller import PonysayController
from tests.conftest import FakeFileSource

PONIES = {'/p/alice.pony': '$b$\nALICE', '/p/bob.pony': '$b$\nBOB'}


def _controller(quotes: dict[str, str] | None = None, seed: int = 0) -> PonysayController:
    rng = random.Random(seed)
    ponies = FakeFileSource(PONIES)
    return PonysayController(
        select_uc=SelectPonyUseCase(ponies, rng),
        render_uc=RenderPonyUseCase(ponies),
        pick_quote_uc=PickQuoteUseCase(FakeFileSource(quotes or {}), rng),
        list_uc=ListPoniesUseCase(ponies),
    )


class TestSay:
    def test_say_with_name(self):
        assert _controller().say('Hi', [ByName(name='bob')]) == ' ____ \n< Hi >\n ---- \nBOB'

    def test_say_unknown_name(self):
        with pytest.raises(NoMatchingPonyError):
            _controller().say('Hi', [ByName(name='zed')])


class TestSayRandomQuote:
    def test_quote_names_the_pony(self):
        for seed in range(20):
            output = _controller({'/q/alice.0': 'Yo'}, seed).say_random_quote()
            assert output == ' ____ \n< Yo >\n ---- \nALICE'

    def test_explicit_constraint_wins(self):
        output = _controller({'/q/alice.0': 'Yo'}).say_random_quote([ByName(name='bob')])
        assert output.endswith('BOB')

    def test_quote_without_names_picks_any_pony(self):
        output = _controller({'/q/+.0': 'Yo'}).say_random_quote()
        assert output.startswith(' ____ \n< Yo >')

    def test_no_quotes(self):
        with pytest.raises(NoQuotesAvailableError):
            _controller().say_random_quote()


class TestListNames:
    def test_names(self):
        assert _controller().list_names() == ['alice', 'bob']
