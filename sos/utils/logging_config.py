"""Logging configuration for the SOS game."""

import logging
import sys


def setup_logging(level: str = "WARNING", format_style: str = "simple") -> None:
    """
    Set up logging for the whole application.

    Logs go to stderr so they do not interleave with the board on stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: "simple" or "detailed"
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    formats = {
        "simple": "%(name)s - %(levelname)s - %(message)s",
        "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
    }
    log_format = formats.get(format_style, formats["simple"])

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
