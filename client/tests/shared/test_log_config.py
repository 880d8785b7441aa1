"""Tests for shared/log_config.py."""

import logging

import pytest

from shared.config import Settings
from shared.log_config import NOISY_LOGGERS, setup_logging


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


class TestSetupLogging:
    def test_explicit_level(self, restore_root_level):
        """An explicit level overrides the setting."""
        setup_logging("debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, restore_root_level):
        """Unknown level names fall back to INFO."""
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_quiets_http_loggers(self, restore_root_level):
        """HTTP client loggers are raised to WARNING."""
        setup_logging("DEBUG")
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_debug_setting_enables_debug(self, restore_root_level):
        """debug=True switches the root logger to DEBUG."""
        setup_logging(settings=Settings(_env_file=None, debug=True, log_level="WARNING"))
        assert logging.getLogger().level == logging.DEBUG

    def test_log_level_setting(self, restore_root_level):
        """Without debug the log_level setting is used."""
        setup_logging(settings=Settings(_env_file=None, log_level="WARNING"))
        assert logging.getLogger().level == logging.WARNING
