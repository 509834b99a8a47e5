"""
logger.py

Responsibility: Installs the process-wide logging handler and format.
Does NOT: write log files, rotate logs, or decide what gets logged.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "porkbun-ddns"


def configure_logging(level: str = "INFO") -> None:
    """
    Attaches a single stdout handler to the root logger.

    Safe to call more than once (the lifespan and the uvicorn runner both
    call it); the handler is only added the first time.

    Args:
        level: A logging level name such as "INFO" or "DEBUG". Unknown
               names fall back to INFO.

    Returns:
        None
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)

    # httpx logs every request at INFO, including URLs; keep that at WARNING.
    logging.getLogger("httpx").setLevel(logging.WARNING)
