# File: clipper/core/log_setup.py

import logging
import sys
from clipper.core.config.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Libraries that log every connection/chunk at DEBUG/INFO
NOISY_LOGGERS = ("urllib3", "multipart")


def configure_logging(level: str = None) -> None:
    """
    Points the root logger at stdout, at settings.LOG_LEVEL unless overridden.
    Safe to call more than once: the handler is only attached the first time.
    """
    root = logging.getLogger()
    root.setLevel(level or settings.LOG_LEVEL)

    if not any(getattr(h, "_clipper", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._clipper = True
        root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
