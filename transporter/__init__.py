"""Transporter: fluent, fakeable HTTP request classes on top of requests."""

from .config import Config, config
from .exceptions import (
    ConfigurationError,
    TransporterError,
    UnknownOperationError,
    UnsupportedMethodError,
)
from .http_client import HttpClient
from .logging_config import get_module_logger, setup_logging
from .request import Request

__all__ = [
    "Config",
    "ConfigurationError",
    "HttpClient",
    "Request",
    "TransporterError",
    "UnknownOperationError",
    "UnsupportedMethodError",
    "config",
    "get_module_logger",
    "setup_logging",
]
