"""Use case: render a pony saying a quote."""

from __future__ import annotations

import logging

from ponysay.l1_entities.pony import Pony
from ponysay.l2_use_cases.ports.pony_source import PonySource
from ponysay.l2_use_cases.utils.balloon import create_balloon
from ponysay.l2_use_cases.utils.compositor import composite
from ponysay.l2_use_cases.utils.pony_parser import parse_pony
from ponysay.l2_use_cases.utils.text_wrapper import DEFAULT_WRAP_WIDTH

log = logging.getLogger('ponysay.render')


class RenderPonyUseCase:
    """Loads, parses and composites a template with a freshly rendered balloon.

    Every balloon slot in the body receives the same balloon. A template with
    no slot renders without one. Both cases are logged, neither is an error.
    """

    def __init__(self, source: PonySource, wrap_width: int = DEFAULT_WRAP_WIDTH) -> None:
        self._source = source
        self._wrap_width = wrap_width

    def execute(self, pony: Pony, quote: str) -> str:
        parsed = parse_pony(pony.content(self._source.read), source=pony.path)
        slots = parsed.balloon_slot_count
        if slots != 1:
            log.warning('%s has %d balloon slots, expected exactly one', pony.path, slots)
        balloon = create_balloon(quote, self._wrap_width)
        log.debug('rendering %s (%d tokens, %d metadata entries)', pony.name, len(parsed.body), len(parsed.metadata))
        return composite(parsed.body, balloon)
