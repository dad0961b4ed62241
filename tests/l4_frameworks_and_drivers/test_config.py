"""Tests for L4 config defaults and build_app_config factory."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ponysay.l3_interface_adapters.gateways.paths import BUILTIN_PONIES_DIR, USER_PONIES_DIR
from ponysay.l4_frameworks_and_drivers.config import APP_CONFIG_DEFAULTS, build_app_config


class TestBuildAppConfig:
    def test_defaults_produce_valid_config(self):
        cfg = build_app_config({})
        assert cfg.balloon.wrap_width == 65
        assert cfg.library.pony_dirs == [str(BUILTIN_PONIES_DIR), str(USER_PONIES_DIR)]
        assert cfg.library.extension == '.pony'

    def test_user_overrides_take_precedence(self):
        cfg = build_app_config({'balloon': {'wrap_width': 40}, 'library': {'pony_dirs': ['/srv/ponies']}})
        assert cfg.balloon.wrap_width == 40
        assert cfg.library.pony_dirs == ['/srv/ponies']
        assert cfg.library.quote_dirs == APP_CONFIG_DEFAULTS['library']['quote_dirs']

    def test_defaults_not_mutated(self):
        build_app_config({'balloon': {'wrap_width': 10}})
        assert APP_CONFIG_DEFAULTS['balloon']['wrap_width'] == 65

    def test_invalid_wrap_width_rejected(self):
        with pytest.raises(ValidationError):
            build_app_config({'balloon': {'wrap_width': 0}})
