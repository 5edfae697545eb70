"""Logging configuration for releasemenu."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FILE_NAME = "releasemenu.log"


def configure_logging(level=logging.INFO, log_dir=None, console_level=logging.WARNING):
    """Set up logging with file rotation and console output.

    Args:
        level: Level of the ``releasemenu`` logger
        log_dir: Directory for the rotating log file (Config.log_dir)
        console_level: Minimum level echoed to stderr. The CLI raises this
            to ERROR because the menu itself is painted on stderr.
    """
    if log_dir is None:
        log_dir = Path.home() / ".releasemenu" / "logs"
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / LOG_FILE_NAME

    file_handler = RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=3)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    root_logger = logging.getLogger("releasemenu")
    root_logger.setLevel(level)
    # Repeated calls replace handlers instead of duplicating every record
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
