"""Thumbnail data provider (ws_thumbnail)."""

from typing import Any, Dict, List, Optional, Union

from piksel.api.base import DataProvider
from piksel.api.queries import thumbnail_query
from piksel.config.settings import THUMBNAIL_ENDPOINT, THUMBNAIL_NOT_FOUND_CODE


class ThumbnailDataProvider(DataProvider):
    """Thumbnails of one asset."""

    endpoint = THUMBNAIL_ENDPOINT
    asset_id: Optional[Union[int, str]] = None

    def fetch_data(self) -> Dict[str, Any]:
        """
        Fetch the thumbnails of the current asset.

        Raises:
            ValueError: If no asset id was given.
        """
        if self.asset_id is None:
            raise ValueError('There is no asset ID provided in ThumbnailDataProvider.')

        asset_id, self.asset_id = self.asset_id, None
        return self.do_request(thumbnail_query(asset_id), use_cache=False).data

    def get(self, asset_id: Union[int, str]) -> Union[List[Any], bool, None]:
        """
        Return the thumbnails of an asset.

        Args:
            asset_id: Asset id.

        Returns:
            List of thumbnails; None when the API does not know the asset's
            thumbnails (code 903); False on any other failure.
        """
        self.asset_id = asset_id
        data = self.fetch_data()
        failure = data.get('failure')
        if failure is not None:
            if isinstance(failure, dict) and failure.get('code') == THUMBNAIL_NOT_FOUND_CODE:
                return None
            return False
        return data.get('thumbnails') or []

    def calculate_total_count(self) -> Optional[int]:
        data = self.get_data()
        return len(data.get('thumbnails') or [])
