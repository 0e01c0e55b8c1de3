"""Entity model: videos, categories and the session cache."""

from piksel.models.base import Entity
from piksel.models.payload import PayloadKind, VideoRecord, to_record
from piksel.models.video import Video
from piksel.models.category import Category
from piksel.models.cache import SessionCache, VideoCollection

__all__ = [
    "Entity",
    "PayloadKind",
    "VideoRecord",
    "to_record",
    "Video",
    "Category",
    "SessionCache",
    "VideoCollection",
]
