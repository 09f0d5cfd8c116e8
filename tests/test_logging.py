"""Tests for the Rich logging setup."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from reactgen.cli._logging import LOGGER_NAME, configure_logging


class TestConfigureLogging:
    def test_quiet_by_default(self) -> None:
        logger = configure_logging()

        assert logger.name == LOGGER_NAME
        assert logger.level == logging.WARNING

    def test_verbose_enables_debug(self) -> None:
        assert configure_logging(verbose=True).level == logging.DEBUG

    def test_single_rich_handler(self) -> None:
        configure_logging()
        logger = configure_logging(verbose=True)

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_module_loggers_are_children(self) -> None:
        configure_logging(verbose=True)

        assert logging.getLogger("reactgen.cli._template").getEffectiveLevel() == logging.DEBUG
