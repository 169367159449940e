"""
Logging Configuration
Sets up the package logger used by the CLI and the API.
"""
import logging
import sys


def setup_logging(level: int | str = logging.INFO, log_file: str | None = None) -> None:
    """
    Configure the logger for the 'app' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG")
        log_file: Optional path to also write logs to.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("app")
    logger.setLevel(level)

    # Avoid duplicate handlers when called again (tests, reload)
    if logger.hasHandlers():
        logger.handlers.clear()

    # stderr keeps stdout free for converted messages
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
