"""
utils/__init__.py - Shared Helpers

Logging setup used by the launcher and the tag cloud pipeline.
"""

import os
import logging


LOG_DIR = "Logs"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name, filename=None):
    """
    Build (or fetch) a named logger writing to Logs/<filename>.log and the console.

    Args:
        name: Logger name shown in every record
        filename: Log file stem (defaults to name)

    Returns:
        Configured logging.Logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    # Handlers are attached once per logger name
    if logger.handlers:
        return logger

    if not os.path.exists(LOG_DIR):
        os.makedirs(LOG_DIR)

    fh = logging.FileHandler(os.path.join(LOG_DIR, f"{filename if filename else name}.log"))
    fh.setLevel(logging.DEBUG)
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)

    formatter = logging.Formatter(LOG_FORMAT)
    fh.setFormatter(formatter)
    ch.setFormatter(formatter)

    logger.addHandler(fh)
    logger.addHandler(ch)
    return logger
