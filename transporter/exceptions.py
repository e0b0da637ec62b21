"""
Custom exceptions for Transporter
"""


class TransporterError(Exception):
    """Base exception for all Transporter errors"""

    pass


class ConfigurationError(TransporterError):
    """
    Raised when required configuration values are missing or invalid.

    The base URL of a request must come from the request itself or from
    the ``transporter.base_uri`` config key; there is no hardcoded fallback.
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        if config_key:
            super().__init__(f"Configuration error for '{config_key}': {message}")
        else:
            super().__init__(f"Configuration error: {message}")


class UnsupportedMethodError(TransporterError, ValueError):
    """Raised when a request declares an HTTP method that cannot be dispatched"""

    def __init__(self, method: str | None, request_name: str | None = None):
        self.method = method
        self.request_name = request_name

        target = f" on {request_name}" if request_name else ""
        if method:
            super().__init__(f"Unsupported HTTP method '{method}'{target}")
        else:
            super().__init__(f"No HTTP method declared{target}")


class UnknownOperationError(TransporterError, AttributeError):
    """
    Raised when an operation is neither part of the request nor of its client.

    Subclasses AttributeError so ``hasattr()`` and ``getattr(obj, name, default)``
    keep working on requests.
    """

    def __init__(self, operation: str, request_name: str | None = None):
        self.operation = operation
        self.request_name = request_name

        owner = request_name or "Request"
        super().__init__(f"{owner} has no operation '{operation}'")
