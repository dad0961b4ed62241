"""Configuration defaults -- lives in L4, not domain."""

from __future__ import annotations

import copy

from ponysay.l1_entities.config import AppConfig
from ponysay.l3_interface_adapters.gateways.paths import (
    BUILTIN_PONIES_DIR,
    BUILTIN_QUOTES_DIR,
    USER_PONIES_DIR,
    USER_QUOTES_DIR,
)
from ponysay.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'balloon': {
        'wrap_width': 65,
    },
    'library': {
        'pony_dirs': [str(BUILTIN_PONIES_DIR), str(USER_PONIES_DIR)],
        'quote_dirs': [str(BUILTIN_QUOTES_DIR), str(USER_QUOTES_DIR)],
        'extension': '.pony',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
