"""Asset workflow status classification."""

from enum import Enum
from typing import Optional


class AssetStatus(str, Enum):
    """Processing status of an uploaded asset."""

    NOT_FOUND = 'not found'
    ERROR = 'error'
    SHARED = 'shared'
    READY = 'ready'
    UPDATED = 'updated'
    NOT_READY = 'not ready'


def classify_asset_status(
    found: bool,
    encoded: bool,
    has_thumbnail: Optional[bool],
    in_default_project: bool,
    shared: bool
) -> AssetStatus:
    """
    Classify an asset; the first matching rule wins.

    Args:
        found: The asset exists.
        encoded: Encoding produced a duration.
        has_thumbnail: True if thumbnails exist, False if they could not be
            fetched (or none exist), None if their state is unknown.
        in_default_project: The asset is already placed in the default project.
        shared: The asset lives in a folder of another account.

    Returns:
        The asset status.
    """
    if not found:
        return AssetStatus.NOT_FOUND

    if has_thumbnail is False and not encoded:
        return AssetStatus.ERROR

    if shared:
        return AssetStatus.SHARED

    if not in_default_project and encoded and has_thumbnail is not False:
        return AssetStatus.READY

    if in_default_project and has_thumbnail is not False:
        return AssetStatus.UPDATED

    return AssetStatus.NOT_READY
