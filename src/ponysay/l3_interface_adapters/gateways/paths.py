"""Shared path constants for configuration, user ponies and logs."""

from __future__ import annotations

from importlib import resources

from platformdirs import user_config_path, user_log_path

CONFIG_DIR = user_config_path('ponysay')
USER_PONIES_DIR = CONFIG_DIR / 'ponies'
USER_QUOTES_DIR = CONFIG_DIR / 'quotes'

LOG_DIR = user_log_path('ponysay')

BUILTIN_PONIES_DIR = resources.files('ponysay') / 'ponies'
BUILTIN_QUOTES_DIR = resources.files('ponysay') / 'quotes'

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
