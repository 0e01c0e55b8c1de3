"""Base class for Piksel data providers."""

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from loguru import logger

from piksel.api.envelope import ResponseEnvelope, normalize
from piksel.api.http_client import HttpClient
from piksel.config.settings import API_VERSION

if TYPE_CHECKING:
    from piksel.config.manager import PikselConfig

# Marks a cache slot that has never been filled (None and False are valid results)
UNSET: Any = object()


class DataProvider(ABC):
    """
    Memoizing accessor for one Piksel resource.

    Subclasses implement :meth:`fetch_data` and :meth:`calculate_total_count`;
    :meth:`get_data` and :meth:`get_total_count` call them at most once until
    a refresh is requested.

    Attributes:
        config: Piksel configuration.
        http: HTTP transport.
        endpoint: Default endpoint requested by :meth:`do_request`.
    """

    endpoint: str = ''

    def __init__(
        self,
        config: "PikselConfig",
        http: Optional[HttpClient] = None
    ) -> None:
        """
        Initialize the provider.

        Args:
            config: Piksel configuration.
            http: HTTP transport (a default HttpClient if None).
        """
        self.config = config
        self.http = http or HttpClient()
        self.id: Optional[str] = None
        self._data: Any = UNSET
        self._total_count: Any = UNSET

    @property
    def debug(self) -> bool:
        return bool(self.config.debug)

    def get_data(self, refresh: bool = False) -> Any:
        """
        Return the provider data, fetching it on first use.

        Args:
            refresh: Re-fetch even if data is cached.

        Returns:
            The data returned by fetch_data.
        """
        if self._data is UNSET or refresh:
            self._data = self.fetch_data()
        return self._data

    def set_data(self, value: Any) -> None:
        self._data = value

    def get_total_count(self, refresh: bool = False) -> Any:
        """
        Return the total number of items, computing it on first use.

        Args:
            refresh: Re-calculate even if a count is cached.

        Returns:
            The value returned by calculate_total_count.
        """
        if self._total_count is UNSET or refresh:
            self._total_count = self.calculate_total_count()
        return self._total_count

    def set_total_count(self, value: Optional[int]) -> None:
        """Set the total count when calculate_total_count cannot determine it."""
        self._total_count = value

    def clear(self) -> None:
        """Forget cached data, count and id."""
        self._data = UNSET
        self._total_count = UNSET
        self.id = None

    @abstractmethod
    def fetch_data(self) -> Any:
        """Fetch the resource data."""

    @abstractmethod
    def calculate_total_count(self) -> Optional[int]:
        """Calculate the total number of items of the resource."""

    def build_url(
        self,
        query: str,
        endpoint: str,
        token: str,
        use_cache: bool = True
    ) -> str:
        """
        Build a read URL.

        Queries starting with '/' are appended as path segments, anything
        else as a query string. Uncached requests get a random `ck`
        parameter.

        Args:
            query: Path or query string.
            endpoint: Endpoint name (e.g. 'ws_asset').
            token: API token.
            use_cache: False to defeat intermediate caches.

        Returns:
            Full request URL.
        """
        prefix = f'{self.config.base_url}/ws/{endpoint}/api/{token}/mode/json/apiv/{API_VERSION}'
        buster = f'ck={random.randint(0, 2 ** 31 - 1)}'

        if query.startswith('/'):
            suffix = '' if use_cache else f'/?{buster}'
            return f'{prefix}{query}{suffix}'

        suffix = '' if use_cache else f'&{buster}'
        return f'{prefix}?{query}{suffix}'

    def do_request(
        self,
        query: str,
        endpoint: Optional[str] = None,
        use_cache: bool = True,
        token: Optional[str] = None
    ) -> ResponseEnvelope:
        """
        Request the Piksel API and normalize the response.

        Args:
            query: Path ('/u/...') or query string ('a=1&...').
            endpoint: Endpoint name (the provider's endpoint if None).
            use_cache: False to bypass HTTP caches (always False in debug).
            token: Token to use instead of the configured one.

        Returns:
            The normalized response envelope.

        Raises:
            APIConnectionError: If the API cannot be reached.
        """
        endpoint = endpoint or self.endpoint
        use_cache = use_cache and not self.debug
        url = self.build_url(query, endpoint, token or self.config.token, use_cache)

        if self.debug:
            logger.debug(f"GET {url}")

        raw = self.http.get_json(url, no_cache=not use_cache)
        envelope = normalize(raw, endpoint, path_style=query.startswith('/'))

        if not envelope.ok:
            logger.warning(
                f"{endpoint} request returned {envelope.status.value}: "
                f"{envelope.failure or 'unexpected response shape'}"
            )
        return envelope
