"""Dependency container -- composition root for wiring all layers together."""

from __future__ import annotations

import random

from ponysay.l1_entities.config import AppConfig
from ponysay.l2_use_cases.list_ponies_use_case import ListPoniesUseCase
from ponysay.l2_use_cases.pick_quote_use_case import PickQuoteUseCase
from ponysay.l2_use_cases.ports.pony_source import PonySource
from ponysay.l2_use_cases.ports.quote_source import QuoteSource
from ponysay.l2_use_cases.render_pony_use_case import RenderPonyUseCase
from ponysay.l2_use_cases.select_pony_use_case import SelectPonyUseCase
from ponysay.l3_interface_adapters.controllers.ponysay_controller import PonysayController
from ponysay.l3_interface_adapters.gateways.directory_source import DirectorySource


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(self, config: AppConfig, rng: random.Random | None = None) -> None:
        self.config = config
        # one random source per invocation, shared by the quote and pony picks
        self.rng = rng or random.Random()

        library = config.library
        self.pony_source: PonySource = DirectorySource(library.pony_dirs)
        self.quote_source: QuoteSource = DirectorySource(library.quote_dirs)

        self.controller = PonysayController(
            select_uc=SelectPonyUseCase(self.pony_source, self.rng, library.extension),
            render_uc=RenderPonyUseCase(self.pony_source, config.balloon.wrap_width),
            pick_quote_uc=PickQuoteUseCase(self.quote_source, self.rng),
            list_uc=ListPoniesUseCase(self.pony_source, library.extension),
        )
