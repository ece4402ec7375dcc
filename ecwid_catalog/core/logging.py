# ecwid_catalog/core/logging.py
import logging
import sys

import colorlog

LOG_FORMAT = "%(log_color)s%(asctime)s %(levelname)-8s [%(name)s]%(reset)s %(message)s"

LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

# one INFO line per request otherwise
NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level=logging.INFO):
    """
    Colored stdout logging for scripts that use the client directly.
    Replaces the root handlers; applications with their own setup should skip it.
    """
    formatter = colorlog.ColoredFormatter(LOG_FORMAT, datefmt="%H:%M:%S", log_colors=LEVEL_COLORS)
    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    logging.getLogger("ecwid_catalog").setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
