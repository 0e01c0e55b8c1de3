"""Custom exceptions for Piksel API errors."""


class PikselError(Exception):
    """Base class for all piksel errors."""

    pass


class ConfigurationError(PikselError):
    """A required configuration option is missing or invalid."""

    pass


class APIConnectionError(PikselError):
    """The API could not be reached (network error, timeout, etc.)."""

    pass
