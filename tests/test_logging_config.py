"""Tests for the root logging setup."""
import logging

import pytest

from weatherdash.core.logging_config import HANDLER_NAME, configure_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:

    def test_single_named_handler(self, root_logger):
        configure_logging("debug")
        configure_logging("info")

        ours = [h for h in root_logger.handlers if h.get_name() == HANDLER_NAME]
        assert len(ours) == 1
        assert root_logger.level == logging.INFO

    def test_uvicorn_access_is_quiet(self, root_logger):
        configure_logging()
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
