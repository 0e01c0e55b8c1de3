"""Adapter turning raw asset or program payloads into one record shape.

Assets (ws_asset) and programs (ws_program) describe the same video with
overlapping but different field names. :func:`to_record` resolves every
field once, through an ordered fallback chain, so that entities never have
to probe raw payloads themselves.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

PathElement = Union[str, int]
Path = Tuple[PathElement, ...]


class PayloadKind(str, Enum):
    """Origin of a video payload."""

    ASSET = 'asset'
    PROGRAM = 'program'


# Fallback chains: candidate paths, probed in order, first present value wins
TITLE_CHAIN: Sequence[Path] = (('title',), ('Title',))
MODIFIED_CHAIN: Sequence[Path] = (('dateStart',), ('datemod',))
DESCRIPTION_CHAIN: Sequence[Path] = (('description',), ('Description',))
SOURCE_CHAIN: Sequence[Path] = (
    ('metadatas', 'custom_m3u8android'),
    ('m3u8AndroidURL',),
    ('asset', 'm3u8AndroidURL'),
)
DATE_START_CHAIN: Sequence[Path] = (('date_start',), ('dateStart',))
DURATION_CHAIN: Sequence[Path] = (('assetFiles', 0, 'duration'), ('duration',))
FILESIZE_CHAIN: Sequence[Path] = (('assetFiles', 0, 'filesize'), ('filesize',))
CAPTIONS_CHAIN: Sequence[Path] = (('captions',), ('asset', 'captions'))
DOWNLOAD_CHAIN: Sequence[Path] = (('assetFiles', 0, 'full_cdn_path'),)


def lookup(raw: Any, path: Path) -> Any:
    """
    Follow a path of keys and list indexes.

    Returns:
        The value, or None if any step is missing.
    """
    current = raw
    for element in path:
        if isinstance(element, int):
            if not isinstance(current, (list, tuple)) or len(current) <= element:
                return None
            current = current[element]
        else:
            if not isinstance(current, Mapping):
                return None
            current = current.get(element)
        if current is None:
            return None
    return current


def first_present(raw: Any, chain: Sequence[Path]) -> Any:
    """Return the first non-None value along a fallback chain."""
    for path in chain:
        value = lookup(raw, path)
        if value is not None:
            return value
    return None


def detect_kind(raw: Mapping[str, Any]) -> PayloadKind:
    """Tell program payloads (uuid, capitalized fields, nested asset) from assets."""
    if 'uuid' in raw or 'Title' in raw or isinstance(raw.get('asset'), Mapping):
        return PayloadKind.PROGRAM
    return PayloadKind.ASSET


def parse_datetime(value: Any) -> Optional[datetime]:
    """Parse an API date (epoch seconds or ISO-like string)."""
    if value is None or value == '':
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value)
    text = str(value).strip()
    if text.isdigit():
        return datetime.fromtimestamp(int(text))
    try:
        return datetime.fromisoformat(text.replace('Z', '+00:00'))
    except ValueError:
        return None


def _as_float(value: Any) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in ('', '0', 'false')
    return bool(value)


@dataclass(frozen=True)
class VideoRecord:
    """
    A video payload with every field resolved.

    Attributes:
        kind: Asset or program.
        asset_id: Asset identifier.
        title: Title ('undefined' if the payload has none).
        modified_at: Last modification date.
        thumbnail_url: Thumbnail URL.
        description: Description.
        source_url: HLS stream URL.
        tags: Raw tag string ("a, b, c").
        date_start: Publication date as given by the API.
        duration: Duration in seconds.
        filesize: Size of the main file in bytes.
        captions: Captions structure.
        download_path: CDN path of the main file.
        downloadable: The `downloadable` custom metadata, if set.
        is_published: Publication flag.
        raw: The original payload.
    """

    kind: PayloadKind
    asset_id: Any
    title: str = 'undefined'
    modified_at: Optional[datetime] = None
    thumbnail_url: Optional[str] = None
    description: Optional[str] = None
    source_url: Optional[str] = None
    tags: Optional[str] = None
    date_start: Optional[str] = None
    duration: Optional[float] = None
    filesize: Optional[float] = None
    captions: Any = None
    download_path: Optional[str] = None
    downloadable: Optional[str] = None
    is_published: bool = False
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


def to_record(raw: Mapping[str, Any]) -> VideoRecord:
    """
    Resolve an asset or program payload.

    Args:
        raw: Raw payload.

    Returns:
        The resolved record.

    Raises:
        ValueError: If the payload has no asset id.
    """
    if not isinstance(raw, Mapping) or raw.get('assetid') in (None, ''):
        raise ValueError('Video payload has no assetid')

    return VideoRecord(
        kind=detect_kind(raw),
        asset_id=raw['assetid'],
        title=first_present(raw, TITLE_CHAIN) or 'undefined',
        modified_at=parse_datetime(first_present(raw, MODIFIED_CHAIN)),
        thumbnail_url=raw.get('thumbnailUrl'),
        description=first_present(raw, DESCRIPTION_CHAIN),
        source_url=first_present(raw, SOURCE_CHAIN) or None,
        tags=raw.get('tags') or None,
        date_start=first_present(raw, DATE_START_CHAIN),
        duration=_as_float(first_present(raw, DURATION_CHAIN)),
        filesize=_as_float(first_present(raw, FILESIZE_CHAIN)),
        captions=first_present(raw, CAPTIONS_CHAIN),
        download_path=lookup(raw, DOWNLOAD_CHAIN[0]),
        downloadable=lookup(raw, ('metadatas', 'downloadable')),
        is_published=_as_bool(raw.get('isPublished')),
        raw=dict(raw),
    )
