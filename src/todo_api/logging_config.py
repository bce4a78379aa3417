"""
Console logging for the service.

``setup_logging`` configures the root logger once; later calls (for example
from tests building several apps) leave the existing handlers alone.
"""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# PUBLIC_INTERFACE
def setup_logging(level: str = "INFO") -> None:
    """
    Attach a console handler to the root logger and set its level.

    Args:
        level: Logging level name, case insensitive. Unknown names fall back to INFO.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
