"""Logging configuration for console runs."""

import logging
import sys

LOGGER_NAME = "location_mapper"


class ConsoleFormatter(logging.Formatter):
    """Prefixes warnings and errors so they stand out on a terminal."""

    LEVEL_MAP = {
        logging.DEBUG: "",
        logging.INFO: "",
        logging.WARNING: "warning: ",
        logging.ERROR: "error: ",
        logging.CRITICAL: "error: ",
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with a severity prefix."""
        prefix = self.LEVEL_MAP.get(record.levelno, "")
        message = super().format(record)
        if prefix:
            return f"{prefix}{message}"
        return message


def setup_logging(debug: bool = False) -> logging.Logger:
    """
    Set up logging for the mapper.

    Calling this more than once only adjusts the level.

    Args:
        debug: Enable debug-level logging

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if not any(isinstance(h.formatter, ConsoleFormatter) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ConsoleFormatter(fmt="%(message)s"))
        logger.addHandler(handler)

    return logger
