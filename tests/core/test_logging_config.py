"""Unit tests for src/core/logging_config.py"""

import logging

from src.core.logging_config import ROOT_LOGGER_NAME, configure_logging


def test_single_handler_after_repeated_setup() -> None:
    configure_logging("INFO")
    logger = configure_logging("DEBUG")
    assert logger.name == ROOT_LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_module_loggers_inherit_level() -> None:
    configure_logging("WARNING")
    module_logger = logging.getLogger("src.services.game_service")
    assert module_logger.getEffectiveLevel() == logging.WARNING
    configure_logging("INFO")
