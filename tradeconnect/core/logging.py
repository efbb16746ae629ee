"""Logging setup"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_tradeconnect", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._tradeconnect = True
    root.addHandler(handler)
    root.setLevel(level.upper())

    # SQL echo is controlled by DATABASE_ECHO, keep the engine logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
