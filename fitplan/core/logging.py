"""Logging setup: console output plus an optional daily-rotated log file."""

import logging
from logging.handlers import TimedRotatingFileHandler

from fitplan.core.config import Settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(settings: Settings) -> None:
    """
    Configure the ``fitplan`` logger once.
    Logs go to the console, and to ``<log_dir>/fitplan.log`` (rotated at midnight) when
    ``log_dir`` is set.
    """
    logger = logging.getLogger("fitplan")
    logger.setLevel(logging.DEBUG if settings.debug else settings.log_level.upper())

    if logger.handlers:
        return

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.log_dir is not None:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            settings.log_dir / "fitplan.log",
            when="midnight",
            interval=1,
            backupCount=14,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging configured (level=%s)", logging.getLevelName(logger.level))
