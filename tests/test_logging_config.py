"""Tests for logging setup."""

import logging

from cashii.logging_config import ClickEchoHandler, setup_logging


def test_setup_logging_is_idempotent():
    logger = setup_logging(logging.DEBUG)
    setup_logging("warning")

    handlers = [h for h in logger.handlers if isinstance(h, ClickEchoHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.WARNING


def test_handler_writes_to_stderr(capsys):
    logger = setup_logging(logging.INFO, logger_name="cashii.test_logging")

    logger.info("ledger loaded")

    assert "INFO cashii.test_logging: ledger loaded" in capsys.readouterr().err
