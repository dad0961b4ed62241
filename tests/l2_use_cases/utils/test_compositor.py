"""Tests for splicing the balloon into parsed tokens."""

from __future__ import annotations

from ponysay.l1_entities.pony import BalloonSlot, LiteralText, Stem
from ponysay.l2_use_cases.utils.compositor import composite
from ponysay.l2_use_cases.utils.pony_parser import parse_pony


class TestComposite:
    def test_order_and_substitution(self):
        tokens = [BalloonSlot(raw='b'), LiteralText(text='\n'), Stem(marker='\\'), LiteralText(text='\nART')]
        assert composite(tokens, '<BALLOON>') == '<BALLOON>\n \\ \nART'

    def test_every_slot_gets_the_same_balloon(self):
        assert composite(parse_pony('$a$|$b$').body, '()') == '()|()'

    def test_no_slot_renders_art_only(self):
        assert composite(parse_pony('art $/$').body, '()') == 'art  / '

    def test_empty(self):
        assert composite([], 'x') == ''
