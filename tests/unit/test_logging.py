"""Unit tests for logging configuration."""
import logging
import pytest

from app.core.logging import QUIET_LOGGERS, setup_logging


@pytest.fixture
def restore_levels():
    """Restore logger levels changed by setup_logging."""
    names = ("",) + QUIET_LOGGERS
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


class TestSetupLogging:
    """Test setup_logging."""

    def test_sets_root_level_from_name(self, restore_levels):
        setup_logging("debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_quiets_client_libraries(self, restore_levels):
        setup_logging("DEBUG")

        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_unknown_level_rejected(self, restore_levels):
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging("chatty")
