"""HTTP client bound to a base URL, used by requests for dispatch."""

from typing import Any

import requests

from .logging_config import get_module_logger

logger = get_module_logger("http_client")


class HttpClient:
    """
    HTTP client wrapper for making requests against one base URL.

    This abstraction enables:
    - Dependency injection for testing
    - Easy mocking in unit tests
    - Per-request configuration (headers, auth, timeout) before sending

    Configuration methods return the client so calls can be chained.
    """

    def __init__(self, base_url: str = ""):
        self.base_url = base_url
        self.headers: dict[str, str] = {}
        self.auth: Any | None = None
        self.request_timeout: float | None = None
        self.body_format = "json"
        self.options: dict[str, Any] = {}

    # Configuration

    def set_base_url(self, base_url: str) -> "HttpClient":
        self.base_url = base_url
        return self

    def with_headers(self, headers: dict[str, str]) -> "HttpClient":
        self.headers.update(headers)
        return self

    def with_header(self, name: str, value: str) -> "HttpClient":
        self.headers[name] = value
        return self

    def with_token(self, token: str, token_type: str = "Bearer") -> "HttpClient":
        """Set the Authorization header, e.g. "Bearer <token>"."""
        self.headers["Authorization"] = f"{token_type} {token}".strip()
        return self

    def with_basic_auth(self, username: str, password: str) -> "HttpClient":
        self.auth = (username, password)
        return self

    def accept(self, content_type: str) -> "HttpClient":
        self.headers["Accept"] = content_type
        return self

    def accept_json(self) -> "HttpClient":
        return self.accept("application/json")

    def as_json(self) -> "HttpClient":
        """Send request bodies as JSON (default)."""
        self.body_format = "json"
        return self

    def as_form(self) -> "HttpClient":
        """Send request bodies form-encoded."""
        self.body_format = "form"
        return self

    def timeout(self, seconds: float) -> "HttpClient":
        self.request_timeout = seconds
        return self

    def with_options(self, **options: Any) -> "HttpClient":
        """
        Set extra keyword arguments passed to every requests call.

        Example:
            client.with_options(verify=False, allow_redirects=False)
        """
        self.options.update(options)
        return self

    # Dispatch

    def build_url(self, path: str) -> str:
        """
        Join the base URL and a path with a single slash.

        Absolute http(s) URLs are returned unchanged.
        """
        if path.startswith(("http://", "https://")):
            return path
        if not self.base_url:
            return path
        if not path:
            return self.base_url

        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _request_kwargs(self, **explicit: Any) -> dict[str, Any]:
        """
        Build the keyword arguments for one requests call.

        Params and body keys passed by the verb method override options of
        the same name, unless the verb has nothing to send (None).
        """
        kwargs: dict[str, Any] = {
            "headers": dict(self.headers) or None,
            "timeout": self.request_timeout,
        }
        if self.auth is not None:
            kwargs["auth"] = self.auth
        kwargs.update(self.options)
        for key, value in explicit.items():
            if value is not None or key not in kwargs:
                kwargs[key] = value
        return kwargs

    def _body_kwargs(self, data: dict[str, Any] | None) -> dict[str, Any]:
        if not data:
            return {}
        if self.body_format == "form":
            return {"data": data}
        return {"json": data}

    def get(self, url: str, query: dict[str, Any] | None = None) -> requests.Response:
        """
        Send a GET request.

        Args:
            url: Path relative to the base URL, or an absolute URL
            query: Optional query parameters

        Returns:
            requests.Response object
        """
        full_url = self.build_url(url)
        logger.debug(f"GET {full_url} params={query}")
        return requests.get(full_url, **self._request_kwargs(params=query or None))

    def head(self, url: str, query: dict[str, Any] | None = None) -> requests.Response:
        """Send a HEAD request with optional query parameters."""
        full_url = self.build_url(url)
        logger.debug(f"HEAD {full_url} params={query}")
        return requests.head(full_url, **self._request_kwargs(params=query or None))

    def post(self, url: str, data: dict[str, Any] | None = None) -> requests.Response:
        """
        Send a POST request.

        Args:
            url: Path relative to the base URL, or an absolute URL
            data: Optional body, sent as JSON or form data depending on body_format

        Returns:
            requests.Response object
        """
        full_url = self.build_url(url)
        logger.debug(f"POST {full_url}")
        return requests.post(full_url, **self._request_kwargs(**self._body_kwargs(data)))

    def put(self, url: str, data: dict[str, Any] | None = None) -> requests.Response:
        """Send a PUT request with an optional body."""
        full_url = self.build_url(url)
        logger.debug(f"PUT {full_url}")
        return requests.put(full_url, **self._request_kwargs(**self._body_kwargs(data)))

    def patch(self, url: str, data: dict[str, Any] | None = None) -> requests.Response:
        """Send a PATCH request with an optional body."""
        full_url = self.build_url(url)
        logger.debug(f"PATCH {full_url}")
        return requests.patch(full_url, **self._request_kwargs(**self._body_kwargs(data)))

    def delete(self, url: str, data: dict[str, Any] | None = None) -> requests.Response:
        """Send a DELETE request with an optional body."""
        full_url = self.build_url(url)
        logger.debug(f"DELETE {full_url}")
        return requests.delete(full_url, **self._request_kwargs(**self._body_kwargs(data)))
