import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None):
    """Configure root logging once and set the service logger level."""
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    logging.getLogger("userservice").setLevel(getattr(logging, level, logging.INFO))
    return logging.getLogger("userservice")
