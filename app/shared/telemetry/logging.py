"""Process-wide log configuration."""

import logging
import sys

from app.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Per-request client logs (one line per session lookup) are too chatty at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging() -> None:
    """Install a stdout handler on the root logger.

    DEBUG when settings.debug (session cache hits/misses become visible),
    INFO otherwise. Safe to call more than once.
    """
    level = logging.DEBUG if get_settings().debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
