"""Piksel API layer: transport, normalization, queries and data providers."""

from piksel.api.exceptions import PikselError, ConfigurationError, APIConnectionError
from piksel.api.envelope import EnvelopeStatus, ResponseEnvelope, normalize
from piksel.api.http_client import HttpClient
from piksel.api.queries import ResourceQuery, SortDirection
from piksel.api.base import DataProvider
from piksel.api.asset_provider import AssetDataProvider
from piksel.api.program_provider import ProgramDataProvider
from piksel.api.program_search_provider import ProgramSearchDataProvider
from piksel.api.metadata_provider import (
    AccountMetadataDataProvider,
    CategoriesDataProvider,
    TagMenuDataProvider,
)
from piksel.api.thumbnail_provider import ThumbnailDataProvider
from piksel.api.user_token_provider import UserTokenDataProvider
from piksel.api.writer import MutationResult, MutationWriter

__all__ = [
    "PikselError",
    "ConfigurationError",
    "APIConnectionError",
    "EnvelopeStatus",
    "ResponseEnvelope",
    "normalize",
    "HttpClient",
    "ResourceQuery",
    "SortDirection",
    "DataProvider",
    "AssetDataProvider",
    "ProgramDataProvider",
    "ProgramSearchDataProvider",
    "AccountMetadataDataProvider",
    "CategoriesDataProvider",
    "TagMenuDataProvider",
    "ThumbnailDataProvider",
    "UserTokenDataProvider",
    "MutationResult",
    "MutationWriter",
]
