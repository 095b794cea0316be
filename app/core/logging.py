"""Logging configuration."""
import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Chatty client libraries, kept at WARNING regardless of the app level
QUIET_LOGGERS = ("httpx", "openai", "googleapiclient", "google_auth_httplib2")


def setup_logging(level: Union[str, int] = "INFO") -> None:
    """
    Configure application logging.

    Log messages carry a bracketed component tag, e.g. "[EXTRACTOR] Attempt 1/3".
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
