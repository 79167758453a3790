"""Process-wide logging setup."""

import logging
import sys
from typing import Optional

from config.defaults import LOG_FORMAT, LOG_LEVEL

_LOGGER_INITIALIZED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once per process.

    Streamlit reruns the script on every interaction, so repeated calls
    must be no-ops.
    """
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    _LOGGER_INITIALIZED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module, configuring logging on first use."""
    configure_logging()
    return logging.getLogger(name)
