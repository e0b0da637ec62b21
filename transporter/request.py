"""
Base class for declaring outbound HTTP requests.

Subclass Request, declare the method and path, then chain configuration
calls and send:

    class ListUsers(Request):
        method = "GET"
        path = "/users"

    response = ListUsers.build().with_query({"page": 2}).send()

A request built with fake() never touches the network; send() returns a
response fabricated from the fake status and fake data.
"""

import json
from collections.abc import Callable
from typing import Any, ClassVar
from urllib.parse import urlencode

import requests

from .config import Config, config
from .exceptions import ConfigurationError, UnknownOperationError, UnsupportedMethodError
from .http_client import HttpClient
from .logging_config import get_module_logger

logger = get_module_logger("request")

BASE_URI_KEY = "transporter.base_uri"

QUERY_METHODS = frozenset({"GET", "HEAD"})
BODY_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})
SUPPORTED_METHODS = QUERY_METHODS | BODY_METHODS


class Request:
    """
    One outbound HTTP request type.

    Subclasses declare ``method``, ``path`` and optionally ``base_url`` as class
    attributes. Override ``get_path()`` to build the path from instance state,
    and ``with_request()`` to configure the client once it is created.
    """

    method: str | None = None
    path: str | None = None
    base_url: str | None = None

    # Called with the client after with_request(); set on a subclass to share
    # client setup without overriding.
    client_hook: ClassVar[Callable[[HttpClient], None] | None] = None

    def __init__(self, http_client: HttpClient | None = None, config_obj: Config | None = None):
        """
        Create the request and bind its client to the resolved base URL.

        Args:
            http_client: HTTP client to dispatch through (a new HttpClient if None)
            config_obj: Config object (optional, uses global config if None)
        """
        if config_obj is None:
            config_obj = config
        if http_client is None:
            http_client = HttpClient()

        self._config = config_obj
        self._client = http_client

        self.query: dict[str, Any] = {}
        self.data: dict[str, Any] = {}
        self.fake_data: dict[str, Any] = {}
        self.use_fake = False
        self.status = 200

        if self.base_url is not None:
            initial_base_url = self.base_url
        else:
            configured = self._config.get(BASE_URI_KEY)
            initial_base_url = configured if configured is not None else ""

        self._client.set_base_url(initial_base_url)

        self.with_request(self._client)

        hook = type(self).client_hook
        if hook is not None:
            hook(self._client)

    @classmethod
    def build(cls, *args: Any, **kwargs: Any) -> "Request":
        """Create a request, passing collaborators through to the constructor."""
        return cls(*args, **kwargs)

    @classmethod
    def fake(cls, status: int = 200, **kwargs: Any) -> "Request":
        """
        Create a request whose send() returns a fabricated response.

        Args:
            status: HTTP status code of the fabricated response
            **kwargs: Collaborators passed to the constructor

        Returns:
            Request in fake mode
        """
        request = cls.build(**kwargs)

        request.use_fake = True
        request.status = status

        return request

    def with_request(self, client: HttpClient) -> None:
        """Hook for subclasses to configure the freshly created client."""

    # Fluent configuration

    def with_data(self, data: dict[str, Any]) -> "Request":
        self.data = {**self.data, **data}
        return self

    def with_fake_data(self, data: dict[str, Any]) -> "Request":
        self.fake_data = {**self.fake_data, **data}
        return self

    def with_query(self, query: dict[str, Any]) -> "Request":
        self.query = {**self.query, **query}
        return self

    def get_base_url(self) -> str:
        """
        Get the base URL this request targets.

        Raises:
            ConfigurationError: If neither the request nor the config sets one
        """
        if self.base_url is not None:
            return self.base_url

        configured = self._config.get(BASE_URI_KEY)
        if configured is not None:
            return configured

        raise ConfigurationError(
            "Neither a base_url nor a config base_uri has been set for this request.",
            config_key=BASE_URI_KEY,
        )

    def set_base_url(self, base_url: str) -> "Request":
        self.base_url = base_url
        self._client.set_base_url(base_url)
        return self

    def set_path(self, path: str) -> "Request":
        self.path = path
        return self

    def get_path(self) -> str:
        """Path used by send(); override to build it from request state."""
        return self.path or ""

    def get_client(self) -> HttpClient:
        return self._client

    # Client passthrough

    def with_headers(self, headers: dict[str, str]) -> "Request":
        self._client.with_headers(headers)
        return self

    def with_header(self, name: str, value: str) -> "Request":
        self._client.with_header(name, value)
        return self

    def with_token(self, token: str, token_type: str = "Bearer") -> "Request":
        self._client.with_token(token, token_type)
        return self

    def with_basic_auth(self, username: str, password: str) -> "Request":
        self._client.with_basic_auth(username, password)
        return self

    def accept(self, content_type: str) -> "Request":
        self._client.accept(content_type)
        return self

    def accept_json(self) -> "Request":
        self._client.accept_json()
        return self

    def as_json(self) -> "Request":
        self._client.as_json()
        return self

    def as_form(self) -> "Request":
        self._client.as_form()
        return self

    def timeout(self, seconds: float) -> "Request":
        self._client.timeout(seconds)
        return self

    def with_options(self, **options: Any) -> "Request":
        self._client.with_options(**options)
        return self

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        raise UnknownOperationError(name, request_name=type(self).__name__)

    # Sending

    def fake_response(self) -> requests.Response:
        """Build the response returned by send() in fake mode."""
        response = requests.Response()
        response.status_code = self.status
        response._content = json.dumps(self.fake_data).encode("utf-8")
        response.encoding = "utf-8"
        response.headers["Content-Type"] = "application/json"
        return response

    def _path_with_query(self) -> str:
        path = self.get_path()
        if not self.query:
            return path

        separator = "&" if "?" in path else "?"
        return f"{path}{separator}{urlencode(self.query, doseq=True)}"

    def send(self) -> requests.Response:
        """
        Perform the request, or fabricate a response in fake mode.

        Returns:
            The client's response, unmodified

        Raises:
            UnsupportedMethodError: If the method is missing or unknown
        """
        if self.use_fake:
            logger.debug(f"{type(self).__name__}: returning fake response (HTTP {self.status})")
            return self.fake_response()

        verb = self.method.upper() if self.method else None
        if verb not in SUPPORTED_METHODS:
            raise UnsupportedMethodError(self.method, request_name=type(self).__name__)

        dispatch: dict[str, Callable[..., requests.Response]] = {
            "GET": self._client.get,
            "HEAD": self._client.head,
            "POST": self._client.post,
            "PUT": self._client.put,
            "PATCH": self._client.patch,
            "DELETE": self._client.delete,
        }

        logger.debug(f"{type(self).__name__}: sending {verb} {self.get_path()}")

        if verb in QUERY_METHODS:
            return dispatch[verb](self.get_path(), self.query)
        return dispatch[verb](self._path_with_query(), self.data)
