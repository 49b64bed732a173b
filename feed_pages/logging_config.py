"""Logging setup for feed_pages."""

import logging
import sys
from typing import Optional

from feed_pages.config import AggregatorConfig, get_config


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("feed_pages")


def setup_logging(config: Optional[AggregatorConfig] = None) -> logging.Logger:
    """Configure the feed_pages logger hierarchy.

    Installs one stderr handler on the package logger. Calling this again
    replaces the handler instead of stacking a second one.
    """
    if config is None:
        config = get_config()

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(config.log_level)

    return logger
