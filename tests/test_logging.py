"""Test the centralized logging functionality."""

import logging
from io import StringIO

from branchify.logging import (
    branch_log_context,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)


def test_centralized_logging():
    """Test that centralized logging works properly."""
    logger = get_logger("branchify.test")

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)

    logger.handlers.clear()
    logger.addHandler(handler)
    try:
        set_global_log_level(logging.INFO)
        logger.info("Test info message")
        assert "Test info message" in log_capture.getvalue()

        log_capture.seek(0)
        log_capture.truncate(0)
        logger.debug("Test debug message")
        assert "Test debug message" not in log_capture.getvalue()

        enable_debug_logging()
        logger.debug("Test debug message after enable")
        assert "Test debug message after enable" in log_capture.getvalue()
    finally:
        logger.removeHandler(handler)


def test_multiple_loggers():
    """Setting the global level affects every child logger."""
    logger1 = get_logger("branchify.module1")
    logger2 = get_logger("branchify.module2")
    assert logger1 is not logger2

    set_global_log_level(logging.WARNING)
    assert logging.getLogger("branchify").level == logging.WARNING
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING


def test_branch_log_context_tags_records(caplog):
    logger = get_logger("branchify.ctx")
    with caplog.at_level(logging.INFO, logger="branchify"):
        with branch_log_context(logger, "renovate/lodash") as log:
            log.info("inside", extra={"collision": {"depName": "lodash"}})
        logger.info("outside")

    inside, outside = caplog.records
    assert inside.branch == "renovate/lodash"
    assert inside.collision == {"depName": "lodash"}
    assert "[branch=renovate/lodash] inside" in inside.getMessage()
    assert not hasattr(outside, "branch")
    assert outside.getMessage() == "outside"


def test_call_site_extra_wins_over_context(caplog):
    logger = get_logger("branchify.ctx")
    with caplog.at_level(logging.INFO, logger="branchify"):
        with branch_log_context(logger, "a") as log:
            log.info("msg", extra={"branch": "override"})
    assert caplog.records[0].branch == "override"
