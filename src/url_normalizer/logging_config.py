"""
Logging setup.

Library modules only create loggers with logging.getLogger(__name__);
applications embedding the normalizer call setup_logging() once.
"""

import logging
from typing import Optional

from url_normalizer.config import get_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for applications using the normalizer.

    Args:
        level: Level name (e.g. 'DEBUG'); defaults to the configured log_level
    """
    level_name = (level or get_config().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        force=True,
    )
