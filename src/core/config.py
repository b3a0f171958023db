"""
Process-wide settings, read from the environment.

The library itself never configures logging on import. Whatever process serves the API calls `configure_logging()` once at startup.
"""

import logging
import os

LOG_LEVEL = os.environ.get("CHESS_LITE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
