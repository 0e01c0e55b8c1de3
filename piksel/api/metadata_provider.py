"""Account metadata providers: raw metadata, categories and tag menu."""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from piksel.api.base import DataProvider
from piksel.api.http_client import HttpClient
from piksel.config.settings import (
    ACCOUNT_METADATA_ENDPOINT,
    CATEGORIES_METANAME,
    TAG_MENU_METANAME,
)

if TYPE_CHECKING:
    from piksel.config.manager import PikselConfig


class AccountMetadataDataProvider(DataProvider):
    """Custom metadata definitions of the account."""

    endpoint = ACCOUNT_METADATA_ENDPOINT

    def fetch_data(self) -> Dict[str, Any]:
        return self.do_request('').data

    def calculate_total_count(self) -> Optional[int]:
        return len(self.get_data())


class MetadataOptionsDataProvider(DataProvider):
    """
    Options of one custom metadata field.

    The options are the comma-separated `fieldOptions` of the custom
    metadata named `metaname`.
    """

    metaname: str = ''

    def __init__(
        self,
        config: "PikselConfig",
        http: Optional[HttpClient] = None,
        account_metadata: Optional[AccountMetadataDataProvider] = None
    ) -> None:
        """
        Initialize the provider.

        Args:
            config: Piksel configuration.
            http: HTTP transport.
            account_metadata: Shared account metadata provider, so the
                metadata is fetched once for all option providers.
        """
        super().__init__(config, http)
        self.account_metadata = account_metadata or AccountMetadataDataProvider(config, self.http)

    def fetch_data(self) -> Optional[List[str]]:
        """
        Return the options of the metadata field.

        Returns:
            List of options, or None if the field is not defined.
        """
        data = self.account_metadata.get_data()
        for metadata in data.get('custom') or []:
            if metadata.get('metaname') == self.metaname:
                return (metadata.get('fieldOptions') or '').split(',')
        return None

    def calculate_total_count(self) -> Optional[int]:
        return len(self.get_data() or [])


class CategoriesDataProvider(MetadataOptionsDataProvider):
    """Category names of the account."""

    metaname = CATEGORIES_METANAME


class TagMenuDataProvider(MetadataOptionsDataProvider):
    """Tags displayed in the tag menu."""

    metaname = TAG_MENU_METANAME
