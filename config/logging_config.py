"""
Logging setup for applications embedding the localization store.
"""

import logging
import sys
from typing import Optional

from config.settings import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

APP_LOGGERS = ['config', 'core', 'infrastructure']
NOISY_LOGGERS = ['httpx', 'httpcore', 'openai']


def setup_logging(debug: Optional[bool] = None, level: int = logging.INFO) -> None:
    """Configure root logging to stdout; debug enables DEBUG for app loggers only."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if debug is None:
        debug = settings.debug

    if debug:
        for name in APP_LOGGERS:
            logging.getLogger(name).setLevel(logging.DEBUG)
        # Silence noisy HTTP debug logs
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
