"""Configuration loading and validation for the Piksel client."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv
from loguru import logger

from piksel.api.exceptions import ConfigurationError
from piksel.config.settings import ENV_VARIABLES

# Required options, checked in this order; the first missing one is reported
REQUIRED_OPTIONS = (
    ('base_url', 'There is no API base URL provided in your Piksel config.'),
    ('token', 'There is no account token provided in your Piksel config.'),
    ('client_token', 'There is no client token provided in your Piksel config.'),
    ('search_uuid', 'There is no default project UUID provided in your Piksel config.'),
    ('api_username', 'There is no api username provided in your Piksel config.'),
    ('api_password', 'There is no api password provided in your Piksel config.'),
)

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


@dataclass
class ValidationResult:
    """Result of a configuration validation."""

    valid: bool
    error_message: Optional[str] = None


@dataclass
class PikselConfig:
    """
    Piksel client configuration.

    Attributes:
        base_url: Piksel API base URL (e.g. https://api-ovp.piksel.com).
        token: Application token used for every read request.
        client_token: Client token, sent with mutation requests.
        search_uuid: Default project UUID.
        api_username: API user name, used to mint short-lived user tokens.
        api_password: API user password.
        ref_id_prefix: Prefix disambiguating category names across sub accounts.
        debug: Disables HTTP caching and logs every requested URL.
        folder_id: Folder of the account; when unset, assets living in a
            folder are considered shared across accounts.
        client_name: Project title identifying the default project among the
            programs associated to an asset.
        read_only_token: Token of the parent account, used to fetch shared
            assets in a child account configuration.
    """

    base_url: Optional[str] = None
    token: Optional[str] = None
    client_token: Optional[str] = None
    search_uuid: Optional[str] = None
    api_username: Optional[str] = None
    api_password: Optional[str] = None
    ref_id_prefix: str = ''
    debug: bool = False
    folder_id: Optional[str] = None
    client_name: Optional[str] = None
    read_only_token: Optional[str] = None

    @property
    def ws_base_url(self) -> str:
        """Base URL of the write services (the `api-` host prefix removed)."""
        return (self.base_url or '').replace('api-', '')

    def validate(self) -> ValidationResult:
        """
        Check that every required option is set.

        Returns:
            ValidationResult with the first failure message, if any.
        """
        for attribute, message in REQUIRED_OPTIONS:
            if not getattr(self, attribute):
                return ValidationResult(valid=False, error_message=message)
        return ValidationResult(valid=True)

    def ensure_valid(self) -> "PikselConfig":
        """
        Raise ConfigurationError if a required option is missing.

        Returns:
            The configuration itself, for chaining.
        """
        result = self.validate()
        if not result.valid:
            logger.error(result.error_message)
            raise ConfigurationError(result.error_message)
        return self

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "PikselConfig":
        """
        Build a configuration from a mapping.

        The mapping uses the Piksel option names::

            {
                'baseURL': 'https://api-ovp.piksel.com',
                'token': 'xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx',
                'clientToken': '...',
                'searchUUID': 'xxxxxxxx',
                'refIDPrefix': '',
                'api': {'username': 'xxxxxx', 'password': '******'},
                'debug': False,
            }

        Args:
            config: Configuration mapping.

        Returns:
            A validated PikselConfig.

        Raises:
            ConfigurationError: If a required option is missing.
        """
        if not isinstance(config.get('api'), Mapping):
            raise ConfigurationError(
                'There is no API configuration provided in your Piksel config.'
            )
        api = config['api']

        return cls(
            base_url=config.get('baseURL'),
            token=config.get('token'),
            client_token=config.get('clientToken'),
            search_uuid=config.get('searchUUID'),
            api_username=api.get('username'),
            api_password=api.get('password'),
            ref_id_prefix=config.get('refIDPrefix') or '',
            debug=_as_bool(config.get('debug', False)),
            folder_id=config.get('folderID'),
            client_name=config.get('clientName'),
            read_only_token=config.get('readOnlyToken'),
        ).ensure_valid()

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "PikselConfig":
        """
        Build a configuration from environment variables.

        A `.env` file is loaded first when present (existing variables win).

        Args:
            env_file: Path to the .env file (default: ./.env).

        Returns:
            A validated PikselConfig.

        Raises:
            ConfigurationError: If a required option is missing.
        """
        load_dotenv(dotenv_path=env_file or Path.cwd() / '.env')

        values: Dict[str, Any] = {'api': {}}
        for option, variable in ENV_VARIABLES.items():
            value = os.getenv(variable)
            if value is None:
                continue
            if option.startswith('api.'):
                values['api'][option.split('.', 1)[1]] = value
            else:
                values[option] = value

        return cls.from_mapping(values)


def _as_bool(value: Any) -> bool:
    """Interpret config flags given as booleans or strings."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)
