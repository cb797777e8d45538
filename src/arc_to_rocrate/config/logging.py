"""Logging configuration module.

This module provides functionality to configure logging levels for all handlers
and the root logger across the application.
"""

import logging

from arc_to_rocrate.config.config_base import LogLevel

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: LogLevel) -> None:
    """Configure logging level for all handlers.

    Args:
        level: Logging level to set for all handlers and root logger.
    """
    root = logging.getLogger()
    if root.handlers:
        for h in root.handlers:
            h.setLevel(level)
        root.setLevel(level)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)
