"""
Logging configuration for Transporter

Every module logs through a child of the "transporter" logger. The package
only installs a NullHandler; applications that want Transporter's output
either configure logging themselves or call setup_logging().
"""

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "transporter"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


class _TransporterHandlerMixin:
    """Marks handlers installed by setup_logging() so a later call can replace them"""


class _StreamHandler(_TransporterHandlerMixin, logging.StreamHandler):
    pass


class _FileHandler(_TransporterHandlerMixin, logging.FileHandler):
    pass


def setup_logging(
    level: int = logging.DEBUG, log_file: Path | None = None, console_output: bool = True
) -> logging.Logger:
    """
    Send Transporter's log records to the console and/or a file.

    Handlers the host application attached to the "transporter" logger are
    kept; only handlers from an earlier setup_logging() call are replaced.

    Args:
        level: Level of the "transporter" logger
        log_file: Optional file receiving DEBUG output (e.g., logs/transporter.log)
        console_output: Whether to print INFO and above to stdout

    Returns:
        The "transporter" logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, _TransporterHandlerMixin):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if console_output:
        console_handler = _StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = _FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get logger for a specific module

    Args:
        module_name: Name of the module (e.g., 'request', 'http_client')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"{PACKAGE_LOGGER}.{module_name}")
