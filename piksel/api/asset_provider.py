"""Asset data provider (ws_asset and ws_asset_associations)."""

from functools import cmp_to_key
from typing import Any, Dict, List, Optional, Union

from loguru import logger

from piksel.api.base import DataProvider
from piksel.api.queries import (
    ResourceQuery,
    SortDirection,
    asset_associations_query,
    asset_by_metadata_query,
    asset_by_tag_query,
    asset_by_title_query,
    asset_by_vid_query,
    asset_list_query,
)
from piksel.config.settings import (
    ASSET_ASSOCIATIONS_ENDPOINT,
    ASSET_ENDPOINT,
    ASSET_SORT,
    CATEGORIES_METANAME,
    DEFAULT_PAGE_SIZE,
)


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def compare_values(a: Any, b: Any) -> int:
    """
    Three-way comparison following the values' natural type.

    Numbers and numeric strings compare numerically, anything else
    compares as text.
    """
    num_a, num_b = _as_number(a), _as_number(b)
    if num_a is not None and num_b is not None:
        left, right = num_a, num_b
    else:
        left, right = str(a), str(b)
    return (left > right) - (left < right)


def sort_items(
    items: List[Dict[str, Any]],
    sort_by: str,
    sort_dir: Union[str, SortDirection] = SortDirection.DESC
) -> List[Dict[str, Any]]:
    """
    Stable sort of API items by one field.

    The direction inverts the comparison outcome, so items comparing equal
    (or missing the field) keep their encounter order in both directions.

    Args:
        items: Items to sort.
        sort_by: Field to compare.
        sort_dir: 'asc' or 'desc'.

    Returns:
        A new sorted list.
    """
    sign = -1 if SortDirection(sort_dir) is SortDirection.DESC else 1

    def compare(a: Dict[str, Any], b: Dict[str, Any]) -> int:
        if sort_by not in a or sort_by not in b:
            return 0
        return sign * compare_values(a[sort_by], b[sort_by])

    return sorted(items, key=cmp_to_key(compare))


def loosely_equal(a: Any, b: Any) -> bool:
    """Equality tolerant to the API mixing 1 and "1"."""
    return a == b or str(a) == str(b)


class AssetDataProvider(DataProvider):
    """Fetch assets from the account and its shared parent account."""

    endpoint = ASSET_ENDPOINT

    def fetch_data(
        self,
        start: int = 0,
        limit: int = DEFAULT_PAGE_SIZE,
        sort_by: str = ASSET_SORT[0],
        sort_dir: str = ASSET_SORT[1]
    ) -> Dict[str, Any]:
        """
        Fetch a page of published assets.

        Args:
            start: Offset of the first asset.
            limit: Page size.
            sort_by: Any asset property (date_start by default).
            sort_dir: 'asc' or 'desc'.

        Returns:
            Payload with an 'asset' list and 'totalCount', or a failure.
        """
        query = ResourceQuery(start=start, limit=limit, sort_by=sort_by, sort_dir=sort_dir)
        return self.do_request(asset_list_query(query)).data

    def fetch_assets_by_tag(
        self,
        tag: str,
        start: int = 0,
        limit: int = DEFAULT_PAGE_SIZE,
        sort_by: str = ASSET_SORT[0],
        sort_dir: str = ASSET_SORT[1]
    ) -> Dict[str, Any]:
        """Fetch a page of published assets whose tags contain `tag`."""
        query = ResourceQuery(start=start, limit=limit, sort_by=sort_by, sort_dir=sort_dir)
        return self.do_request(asset_by_tag_query(tag, query)).data

    def fetch_assets_by_metadata(
        self,
        metadata: str,
        value: str,
        start: int = 0,
        limit: int = DEFAULT_PAGE_SIZE,
        sort_by: str = ASSET_SORT[0],
        sort_dir: str = ASSET_SORT[1]
    ) -> Dict[str, Any]:
        """
        Fetch a page of published assets by custom metadata value.

        In a child account configuration (a read-only token is set),
        category queries are also run against the parent account. Both
        pages are merged, re-sorted, cut to `limit` and their counts summed,
        since neither account can paginate over the union.

        Args:
            metadata: Custom metadata name (e.g. 'Categories').
            value: Metadata value.
            start: Offset of the first asset.
            limit: Page size.
            sort_by: Any asset property (date_start by default).
            sort_dir: 'asc' or 'desc'.

        Returns:
            Payload with an 'asset' list and 'totalCount', or a failure.
        """
        query = ResourceQuery(start=start, limit=limit, sort_by=sort_by, sort_dir=sort_dir)
        query_string = asset_by_metadata_query(metadata, value, query)

        envelope = self.do_request(query_string)
        data = envelope.data

        if metadata != CATEGORIES_METANAME or not self.config.read_only_token or not envelope.ok:
            return data

        shared = self.do_request(query_string, token=self.config.read_only_token)
        shared_count = shared.total_count or 0
        if not shared.ok or shared_count <= 0:
            return data

        merged = list(data.get('asset') or []) + list(shared.data.get('asset') or [])
        data = dict(data)
        data['asset'] = sort_items(merged, sort_by, sort_dir)[:limit]
        data['totalCount'] = (envelope.total_count or 0) + shared_count
        logger.debug(
            f"Merged {shared_count} shared assets for {metadata}={value}, "
            f"total {data['totalCount']}"
        )
        return data

    def fetch_asset_by_vid(
        self,
        vid: Union[int, str],
        use_reference_id: bool = False,
        use_cache: bool = True,
        published_only: bool = True
    ) -> Dict[str, Any]:
        """
        Fetch one asset by asset id or reference id.

        Args:
            vid: An asset id (numeric) or a reference id.
            use_reference_id: Treat a numeric `vid` as a reference id.
            use_cache: False to bypass HTTP caches.
            published_only: False to also find unpublished assets.

        Returns:
            The asset, or the response data (failure) if none was found.
        """
        query = asset_by_vid_query(vid, use_reference_id, published_only)
        data = self.do_request(query, use_cache=use_cache).data
        return self._first_asset(data)

    def fetch_asset_by_title(self, title: str) -> Dict[str, Any]:
        """Fetch one published asset by its title."""
        data = self.do_request(asset_by_title_query(title)).data
        return self._first_asset(data)

    def fetch_associations_by_asset_id(
        self,
        asset_id: Union[int, str],
        start: int = 0,
        limit: int = DEFAULT_PAGE_SIZE
    ) -> Dict[str, Any]:
        """
        Fetch the programs and links associated to an asset.

        Returns:
            Payload with an 'associatedPrograms' list, or a failure.
        """
        query = asset_associations_query(asset_id, ResourceQuery(start=start, limit=limit))
        return self.do_request(query, endpoint=ASSET_ASSOCIATIONS_ENDPOINT).data

    def filter_assets_by_property(
        self,
        data: Dict[str, Any],
        prop: str,
        value: Any
    ) -> Dict[str, Any]:
        """
        Remove the assets whose `prop` equals `value`.

        Only top-level properties are looked up: a dotted path such as
        'metadatas.hidden' matches nothing and leaves the list untouched.

        Args:
            data: Payload with an 'asset' list.
            prop: Asset property name.
            value: Excluded value.

        Returns:
            A copy of the payload; 'currentCount' is updated if present.
        """
        if 'asset' not in data:
            return data

        data = dict(data)
        data['asset'] = [
            item for item in data['asset']
            if not (prop in item and loosely_equal(item[prop], value))
        ]
        if 'currentCount' in data:
            data['currentCount'] = len(data['asset'])
        return data

    def calculate_total_count(self) -> Optional[int]:
        """Count the published assets of the account."""
        envelope = self.do_request(asset_list_query(ResourceQuery(limit=1)))
        return envelope.total_count

    @staticmethod
    def _first_asset(data: Dict[str, Any]) -> Dict[str, Any]:
        assets = data.get('asset')
        if isinstance(assets, list) and assets and assets[0]:
            return assets[0]
        return data
