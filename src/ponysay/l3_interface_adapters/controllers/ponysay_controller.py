"""PonysayController -- one invocation: resolve the quote, pick a pony, render."""

from __future__ import annotations

import logging

from ponysay.l1_entities.constraint import Constraint
from ponysay.l2_use_cases.list_ponies_use_case import ListPoniesUseCase
from ponysay.l2_use_cases.pick_quote_use_case import PickQuoteUseCase
from ponysay.l2_use_cases.render_pony_use_case import RenderPonyUseCase
from ponysay.l2_use_cases.select_pony_use_case import SelectPonyUseCase

log = logging.getLogger('ponysay.controller')


class PonysayController:
    """Bridges the CLI to the use cases. Holds no state between calls."""

    def __init__(
        self,
        select_uc: SelectPonyUseCase,
        render_uc: RenderPonyUseCase,
        pick_quote_uc: PickQuoteUseCase,
        list_uc: ListPoniesUseCase,
    ) -> None:
        self._select_uc = select_uc
        self._render_uc = render_uc
        self._pick_quote_uc = pick_quote_uc
        self._list_uc = list_uc

    def say(self, quote: str, constraints: list[Constraint] | None = None) -> str:
        pony = self._select_uc.execute(constraints)
        return self._render_uc.execute(pony, quote)

    def say_random_quote(self, constraints: list[Constraint] | None = None) -> str:
        """Render a random quote. The quote's pony is only used when no constraint was given."""
        quote = self._pick_quote_uc.execute()
        constraints = list(constraints or [])
        if not constraints and quote.constraint is not None:
            constraints.append(quote.constraint)
        log.debug('random quote from %s, constraints %s', quote.source, [str(c) for c in constraints])
        return self.say(quote.text, constraints)

    def list_names(self) -> list[str]:
        return self._list_uc.execute()
