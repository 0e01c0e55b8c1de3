"""Query builders for the Piksel read endpoints.

All functions are pure: they turn typed parameters into the query string
(or slash-style path, for the user token) expected by one endpoint.
Pagination windows are inclusive: ``end = start + limit - 1``.
"""

import base64
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union
from urllib.parse import quote_plus

from piksel.config.settings import (
    ASSET_SORT,
    CATEGORIES_METANAME,
    DEFAULT_PAGE_SIZE,
    PROGRAM_SORT,
)


class SortDirection(str, Enum):
    """Sort direction accepted by the API."""

    ASC = 'asc'
    DESC = 'desc'


@dataclass(frozen=True)
class ResourceQuery:
    """
    Pagination window, sort order and filters of a list request.

    Attributes:
        start: Offset of the first item (>= 0).
        limit: Number of items (> 0).
        sort_by: Sort field.
        sort_dir: Sort direction.
        filters: Additional query parameters; values are percent-encoded.
    """

    start: int = 0
    limit: int = DEFAULT_PAGE_SIZE
    sort_by: str = ASSET_SORT[0]
    sort_dir: SortDirection = SortDirection(ASSET_SORT[1])
    filters: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.limit <= 0:
            raise ValueError(f"limit must be > 0, got {self.limit}")
        object.__setattr__(self, 'sort_dir', SortDirection(self.sort_dir))

    @property
    def end(self) -> int:
        """Inclusive index of the last requested item."""
        return self.start + self.limit - 1

    @classmethod
    def for_programs(
        cls,
        start: int = 0,
        limit: int = DEFAULT_PAGE_SIZE,
        sort_by: str = PROGRAM_SORT[0],
        sort_dir: Union[str, SortDirection] = PROGRAM_SORT[1],
    ) -> "ResourceQuery":
        """Query with the program default sort (sortnum, desc)."""
        return cls(start=start, limit=limit, sort_by=sort_by, sort_dir=sort_dir)

    def with_filters(self, **filters: str) -> "ResourceQuery":
        """Return a copy of this query with extra filters."""
        return ResourceQuery(
            start=self.start,
            limit=self.limit,
            sort_by=self.sort_by,
            sort_dir=self.sort_dir,
            filters={**self.filters, **filters},
        )


def encode_filter(value: str) -> str:
    """Percent-encode a filter value (spaces as '+')."""
    return quote_plus(str(value))


def encode_secret(value: str) -> str:
    """Base64 then percent-encode a value (search terms, passwords)."""
    encoded = base64.b64encode(str(value).encode('utf-8')).decode('ascii')
    return quote_plus(encoded)


def _window(query: ResourceQuery) -> str:
    return f'start={query.start}&end={query.end}'


def _sort(query: ResourceQuery) -> str:
    return f'sortby={query.sort_by}&sortdir={query.sort_dir.value}'


def asset_list_query(query: ResourceQuery, published_only: bool = True) -> str:
    """
    Query for a page of assets.

    Filters are inserted between the publication flag and the
    shared/asset-files flags.

    Examples:
        >>> asset_list_query(ResourceQuery(start=0, limit=20))
        'start=0&end=19&sortby=date_start&sortdir=desc&isPublished=true&include_shared=true&assetfiles=true'
    """
    parts = [_window(query), _sort(query)]
    if published_only:
        parts.append('isPublished=true')
    parts.extend(f'{name}={encode_filter(value)}' for name, value in query.filters.items())
    parts.append('include_shared=true&assetfiles=true')
    return '&'.join(parts)


def asset_by_tag_query(tag: str, query: ResourceQuery) -> str:
    """Query for assets whose tags contain `tag` (wildcard match)."""
    return asset_list_query(query.with_filters(tags=f'%{tag}%'))


def asset_by_metadata_query(
    metadata: str,
    value: str,
    query: ResourceQuery
) -> str:
    """Query for assets whose custom metadata `metadata` equals `value`."""
    return asset_list_query(query.with_filters(metadata=metadata, metavalue=value))


def asset_by_category_query(category: str, query: ResourceQuery) -> str:
    """Query for assets of a category (the `Categories` custom metadata)."""
    return asset_by_metadata_query(CATEGORIES_METANAME, category, query)


def asset_by_vid_query(
    vid: Union[int, str],
    use_reference_id: bool = False,
    published_only: bool = True
) -> str:
    """
    Query for a single asset by asset id or reference id.

    Numeric identifiers are asset ids (`a=`) unless `use_reference_id`
    is set; anything else is a reference id (`r=`).
    """
    identifier = 'a' if str(vid).isdigit() and not use_reference_id else 'r'
    published = 'isPublished=true&' if published_only else ''
    return f'{identifier}={vid}&{published}include_shared=true&assetfiles=true'


def asset_by_title_query(title: str) -> str:
    """Query for a published asset by its exact title."""
    return f'title={encode_filter(title)}&isPublished=true&include_shared=true&assetfiles=true'


def asset_associations_query(
    asset_id: Union[int, str],
    query: Optional[ResourceQuery] = None
) -> str:
    """Query for the programs and links associated to an asset."""
    query = query or ResourceQuery()
    return f'assetId={asset_id}&{_window(query)}'


def _program_list(selector: str, query: ResourceQuery) -> str:
    return (
        f'{selector}&{_window(query)}&{_sort(query)}'
        '&include_viewcount=true&include_details=true'
    )


def program_by_project_query(project_uuid: str, query: ResourceQuery) -> str:
    """Query for the programs of a project."""
    return _program_list(f'p={project_uuid}', query)


def program_by_ref_query(ref_id: str, query: ResourceQuery) -> str:
    """Query for the programs sharing a reference id."""
    return _program_list(f'refid={ref_id}', query)


def program_by_uuid_query(program_uuid: str) -> str:
    """Query for a single program."""
    return f'v={program_uuid}'


def program_search_query(
    search: str,
    project_uuid: str,
    query: ResourceQuery
) -> str:
    """
    Query for a full-text program search inside a project.

    Program search uses camelCase sort parameters, unlike the other
    endpoints.
    """
    return (
        f'p={project_uuid}&field&s={encode_secret(search)}&{_window(query)}'
        f'&sortBy={query.sort_by}&sortDir={query.sort_dir.value}'
    )


def thumbnail_query(asset_id: Union[int, str]) -> str:
    """Query for the thumbnails of an asset."""
    return f'assetId={asset_id}'


def user_token_path(username: str, password: str) -> str:
    """Slash-style path minting a short-lived user token."""
    return f'/u/{username}/p/{encode_secret(password)}'
