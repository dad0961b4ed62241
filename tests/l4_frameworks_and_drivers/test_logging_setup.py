"""Tests for file logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

from ponysay.l4_frameworks_and_drivers.logging_setup import setup_file_logging


class TestSetupFileLogging:
    def test_writes_to_log_file(self, tmp_path: Path):
        root = logging.getLogger('ponysay')
        before = list(root.handlers)
        level = root.level
        try:
            log_path = setup_file_logging(tmp_path / 'logs')
            logging.getLogger('ponysay.select').debug('selected %s', 'alice')
            for handler in root.handlers:
                handler.flush()
            text = log_path.read_text(encoding='utf-8')
            assert 'Debug logging started' in text
            assert 'selected alice' in text
        finally:
            for handler in root.handlers[len(before) :]:
                handler.close()
            root.handlers = before
            root.setLevel(level)
