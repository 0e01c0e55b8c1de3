"""HTTP transport for the Piksel API."""

from typing import Any, Dict, Optional

import requests
from loguru import logger

from piksel.api.exceptions import APIConnectionError
from piksel.config.settings import (
    NO_CACHE_HEADERS,
    REQUEST_TIMEOUT_SECONDS,
    USER_AGENT,
)


class HttpClient:
    """
    Thin JSON-over-HTTP wrapper around requests.

    Attributes:
        timeout: Request timeout in seconds.
        verify: Whether TLS certificates are verified.
    """

    def __init__(
        self,
        timeout: int = REQUEST_TIMEOUT_SECONDS,
        verify: bool = True
    ) -> None:
        """
        Initialize the HTTP client.

        Args:
            timeout: Request timeout in seconds.
            verify: Whether TLS certificates are verified.
        """
        self.timeout = timeout
        self.verify = verify

    def build_headers(self, no_cache: bool = False) -> Dict[str, str]:
        """
        Build request headers.

        Args:
            no_cache: Add headers preventing any intermediate caching.

        Returns:
            Header dictionary.
        """
        headers = {'User-Agent': USER_AGENT}
        if no_cache:
            headers.update(NO_CACHE_HEADERS)
        return headers

    def get_json(self, url: str, no_cache: bool = False) -> Any:
        """
        Perform a GET request and decode its JSON body.

        Args:
            url: Full request URL.
            no_cache: Send no-cache headers.

        Returns:
            Decoded JSON, or None if the body is not valid JSON.

        Raises:
            APIConnectionError: If the request itself fails.
        """
        try:
            response = requests.get(
                url,
                headers=self.build_headers(no_cache),
                timeout=self.timeout,
                verify=self.verify
            )
        except requests.RequestException as e:
            logger.warning(f"Request error: {e}")
            raise APIConnectionError(str(e)) from e

        return self._decode(response)

    def send_json(
        self,
        method: str,
        url: str,
        payload: Dict[str, Any]
    ) -> Any:
        """
        Send a JSON body (POST, PUT or DELETE) and decode the JSON reply.

        Mutation requests always bypass caches.

        Args:
            method: HTTP method.
            url: Full request URL.
            payload: JSON-serializable request body.

        Returns:
            Decoded JSON, or None if the body is not valid JSON.

        Raises:
            APIConnectionError: If the request itself fails.
        """
        try:
            response = requests.request(
                method,
                url,
                json=payload,
                headers=self.build_headers(no_cache=True),
                timeout=self.timeout,
                verify=self.verify
            )
        except requests.RequestException as e:
            logger.warning(f"{method} request error: {e}")
            raise APIConnectionError(str(e)) from e

        return self._decode(response)

    @staticmethod
    def _decode(response: requests.Response) -> Optional[Any]:
        """Decode a JSON body, logging HTTP errors and invalid payloads."""
        if response.status_code != 200:
            logger.warning(f"API request error: {response.status_code}")
        try:
            return response.json()
        except ValueError:
            logger.warning(f"Invalid JSON in response ({response.status_code})")
            return None
