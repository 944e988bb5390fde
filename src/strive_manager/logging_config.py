"""Application logging.

Everything goes to strive_manager.log in the per-user data directory;
``--debug`` mirrors it to stdout.
"""

import logging
import sys

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Attach handlers to the ``strive_manager`` logger.

    Safe to call more than once; earlier handlers are replaced.

    Args:
        debug: Also echo records to stdout

    Returns:
        The package logger
    """
    from .config.paths import GamePaths

    log_file = GamePaths.ensure_config_dir() / GamePaths.LOG_FILE_NAME

    logger = logging.getLogger("strive_manager")
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(file_handler)

    if debug:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for one module, e.g. ``get_logger("discovery")``."""
    return logging.getLogger(f"strive_manager.{name}")
