"""HTTP client abstraction for dependency injection and testability."""

from typing import Any

import requests
from urllib3.exceptions import LocationParseError

from .config import Config, config
from .exceptions import TransportError
from .logging_config import get_module_logger

logger = get_module_logger("http_client")


class HttpClient:
    """
    HTTP client wrapper for making requests.

    This abstraction enables:
    - Dependency injection for testing
    - Easy mocking in unit tests
    - Centralized HTTP configuration (User-Agent, default timeout)

    Failures of the underlying requests call surface as TransportError with the
    original exception chained, including URLs urllib3 cannot parse.
    """

    def __init__(self, config_obj: Config | None = None):
        self.config = config_obj if config_obj is not None else config

    def _headers(self, headers: dict[str, str] | None) -> dict[str, str]:
        merged = {}
        user_agent = self.config.get("http.headers.user_agent")
        if user_agent:
            merged["User-Agent"] = user_agent
        if headers:
            merged.update(headers)
        return merged

    def _timeout(self, timeout: float | None) -> float | None:
        if timeout is not None:
            return timeout
        return self.config.get("http.timeouts.request")

    def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        params: Any | None = None,
        timeout: float | None = None,
        **kwargs,
    ) -> requests.Response:
        """
        Send a GET request.

        Args:
            url: URL to request
            headers: Optional HTTP headers
            params: Optional query parameters
            timeout: Optional request timeout in seconds
            **kwargs: Additional arguments to pass to requests.get()

        Returns:
            requests.Response object

        Raises:
            TransportError: If the request could not be completed
        """
        try:
            return requests.get(
                url,
                headers=self._headers(headers),
                params=params,
                timeout=self._timeout(timeout),
                **kwargs,
            )
        except (requests.exceptions.RequestException, LocationParseError) as e:
            logger.error(f"GET {url} failed: {e}")
            raise TransportError(f"GET {url} failed: {e}", url=url) from e

    def post(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
        data: Any | None = None,
        timeout: float | None = None,
        **kwargs,
    ) -> requests.Response:
        """
        Send a POST request.

        Args:
            url: URL to request
            headers: Optional HTTP headers
            json: Optional JSON data to send
            data: Optional raw body or form data to send
            timeout: Optional request timeout in seconds
            **kwargs: Additional arguments to pass to requests.post()

        Returns:
            requests.Response object

        Raises:
            TransportError: If the request could not be completed
        """
        try:
            return requests.post(
                url,
                headers=self._headers(headers),
                json=json,
                data=data,
                timeout=self._timeout(timeout),
                **kwargs,
            )
        except (requests.exceptions.RequestException, LocationParseError) as e:
            logger.error(f"POST {url} failed: {e}")
            raise TransportError(f"POST {url} failed: {e}", url=url) from e


# Shared default instance used when no client is injected
default_http_client = HttpClient()


def resolve_http_client(
    http_client: HttpClient | None = None, config_obj: Config | None = None
) -> HttpClient:
    """Pick the injected client, else one built from config_obj, else the default"""
    if http_client is not None:
        return http_client
    if config_obj is not None:
        return HttpClient(config_obj)
    return default_http_client
