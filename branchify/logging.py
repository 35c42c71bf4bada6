"""Centralized logging configuration for branchify."""

import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator, MutableMapping, Optional, Tuple

# Flag to track if we've already set up the root logger
_ROOT_LOGGER_CONFIGURED = False

ROOT_LOGGER_NAME = "branchify"


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Set up the root branchify logger with a single handler.

    This should only be called once to avoid duplicate handlers.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to StreamHandler on stderr).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    root_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # stdout is reserved for `run --stdout` JSON output
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)

    formatter = logging.Formatter(format_string)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Let logs propagate to root logger so pytest can capture them
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger with branchify's standard configuration.

    All loggers inherit from the root 'branchify' logger configuration.

    Args:
        name: Logger name (typically __name__ from calling module).

    Returns:
        Configured logger instance.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)  # Inherit from parent

    return logger


def set_global_log_level(level: int) -> None:
    """Set the log level for all branchify loggers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Disable debug logging, set to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Reset logging configuration (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


class ContextAdapter(logging.LoggerAdapter):
    """Logger adapter that merges fixed context into each record's ``extra``.

    Call-site ``extra`` values are kept; context keys fill in the rest.
    Messages are prefixed with the context so plain formatters still show it.
    """

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        merged = dict(self.extra or {})
        merged.update(kwargs.get("extra") or {})
        kwargs["extra"] = merged
        prefix = " ".join(f"{k}={v}" for k, v in (self.extra or {}).items())
        if prefix:
            msg = f"[{prefix}] {msg}"
        return msg, kwargs


@contextmanager
def branch_log_context(
    logger: logging.Logger, branch_name: str
) -> Iterator[ContextAdapter]:
    """Yield a logger that tags every record with ``branch=<branch_name>``.

    The adapter is only valid inside the ``with`` block; nothing global is
    modified, so tags never leak into records emitted after the block.

    Args:
        logger: Underlying logger.
        branch_name: Branch currently being processed.
    """
    adapter = ContextAdapter(logger, {"branch": branch_name})
    try:
        yield adapter
    finally:
        adapter.extra = {}


# Initialize the root logger when the module is imported
setup_root_logger()
