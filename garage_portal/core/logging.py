"""
Logging helpers.
"""

import logging
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Install the root handler once and set the portal log level."""
    global _configured
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logging.getLogger("garage").addHandler(handler)
        _configured = True
    logging.getLogger("garage").setLevel(level.upper())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``garage`` namespace."""
    if not name:
        return logging.getLogger("garage")
    if not name.startswith("garage"):
        name = f"garage.{name}"
    return logging.getLogger(name)
