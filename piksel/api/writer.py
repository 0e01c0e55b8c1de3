"""Mutation requests: authenticated writes to the Piksel services."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from loguru import logger

from piksel.api.http_client import HttpClient
from piksel.config.settings import API_VERSION, HEADER_VERSION, WRITE_API_VERSION

if TYPE_CHECKING:
    from piksel.config.manager import PikselConfig

DEFAULT_ERROR_MESSAGE = 'an error occurred during execution'


@dataclass(frozen=True)
class MutationResult:
    """
    Outcome of a mutation workflow.

    Attributes:
        success: True if the API accepted the write (or none was needed).
        message: Human readable outcome, prefixed with the workflow name.
    """

    success: bool
    message: str

    def __bool__(self) -> bool:
        return self.success

    def to_dict(self) -> Dict[str, Any]:
        """Return ``{"success": True, ...}`` or ``{"failure": True, ...}``."""
        key = 'success' if self.success else 'failure'
        return {key: True, 'message': self.message}

    @classmethod
    def ok(cls, workflow: str, message: str) -> "MutationResult":
        return cls(success=True, message=f'[{workflow}] {message}')

    @classmethod
    def failed(cls, workflow: str, message: str) -> "MutationResult":
        return cls(success=False, message=f'[{workflow}] {message}')


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two mappings.

    Nested mappings are merged key by key; for any other value the one
    from `override` wins.

    Examples:
        >>> deep_merge({'a': {'x': 1}}, {'a': {'y': 2}})
        {'a': {'x': 1, 'y': 2}}
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class MutationWriter:
    """
    Send authenticated write requests.

    Every request body is wrapped as::

        {"request": {
            "authentication": {"app_token", "client_token", "user_token"},
            "header": {"header_version": 1, "api_version": "5", "no_cache": true},
            <resource>: {...}
        }}
    """

    def __init__(self, config: "PikselConfig", http: Optional[HttpClient] = None) -> None:
        self.config = config
        self.http = http or HttpClient()

    @property
    def services_url(self) -> str:
        return f'{self.config.base_url}/services/index.php?&mode=json'

    def resource_url(self, resource: str, method: str) -> str:
        """URL of a REST-style write (`method` is 'put' or 'delete')."""
        return (
            f'{self.config.ws_base_url}/ws/{resource}/mode/json/'
            f'apiv/{WRITE_API_VERSION}?method={method}&'
        )

    def build_request(
        self,
        user_token: str,
        resource: str,
        body: Mapping[str, Any],
        extras: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Build an authenticated request envelope.

        Args:
            user_token: Short-lived user token.
            resource: Resource key (e.g. 'ws_asset').
            body: Resource body.
            extras: Caller supplied request fragments, deep-merged under
                the envelope (the envelope wins on conflicts).

        Returns:
            JSON-serializable request body.
        """
        request = {
            'request': {
                'authentication': {
                    'app_token': self.config.token,
                    'client_token': self.config.client_token,
                    'user_token': user_token,
                },
                'header': {
                    'header_version': HEADER_VERSION,
                    'api_version': API_VERSION,
                    'no_cache': True,
                },
                resource: dict(body),
            },
        }
        return deep_merge(extras, request) if extras else request

    def send(
        self,
        method: str,
        url: str,
        request: Dict[str, Any],
        workflow: str,
        success_message: str
    ) -> MutationResult:
        """
        Send a write and interpret the response envelope.

        Args:
            method: HTTP method (POST, PUT or DELETE).
            url: Write URL.
            request: Request envelope.
            workflow: Workflow name, used as message prefix.
            success_message: Message of a successful outcome.

        Returns:
            The mutation result.

        Raises:
            APIConnectionError: If the API cannot be reached.
        """
        if self.config.debug:
            logger.debug(f"{method} {url}")

        content = self.http.send_json(method, url, request)
        response = content.get('response') if isinstance(content, dict) else None
        response = response if isinstance(response, dict) else {}

        if 'failure' in response:
            failure = response['failure']
            reason = failure.get('reason') if isinstance(failure, dict) else None
            message = reason or DEFAULT_ERROR_MESSAGE
            logger.error(f"[{workflow}] {message}")
            return MutationResult.failed(workflow, message)

        if 'success' in response:
            logger.info(f"[{workflow}] {success_message}")
            return MutationResult.ok(workflow, success_message)

        logger.error(f"[{workflow}] unexpected response: {content!r}")
        return MutationResult.failed(workflow, DEFAULT_ERROR_MESSAGE)
