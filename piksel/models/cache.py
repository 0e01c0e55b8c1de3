"""Session scoped cache of video collections."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional

if TYPE_CHECKING:
    from piksel.models.video import Video


@dataclass
class VideoCollection:
    """
    A page of videos keyed by slug, with the total count of its query.

    Attributes:
        videos: Videos keyed by slug (None until fetched).
        total_count: Total number of matching videos (None until known).
    """

    videos: Optional[Dict[str, "Video"]] = None
    total_count: Optional[int] = None


class SessionCache:
    """
    In-memory cache for one logical user session.

    Holds the videos already built (by slug), the tag collections (by tag)
    and the project collections (by project UUID). The cache is owned by
    the caller and injected into the client; nothing is ever evicted.
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self.videos: Dict[str, "Video"] = {}
        self.tags: Dict[str, VideoCollection] = {}
        self.programs: Dict[str, VideoCollection] = {}

    def get(self, slug: str) -> Optional["Video"]:
        """
        Retrieve a video from the cache.

        Args:
            slug: Video slug.

        Returns:
            The cached video, or None if not found.
        """
        return self.videos.get(slug)

    def set(self, video: "Video") -> "Video":
        """Store a video under its slug."""
        self.videos[video.slug] = video
        return video

    def find_by_id(self, vid: Any) -> Optional["Video"]:
        """Return the first cached video whose id equals `vid` (compared as text)."""
        for video in self.videos.values():
            if str(video.id) == str(vid):
                return video
        return None

    def tag(self, tag: str) -> VideoCollection:
        """Return the collection of a tag, creating an empty one if needed."""
        return self.tags.setdefault(tag, VideoCollection())

    def project(self, project_uuid: str) -> VideoCollection:
        """Return the collection of a project, creating an empty one if needed."""
        return self.programs.setdefault(project_uuid, VideoCollection())

    def clear(self) -> None:
        """Clear all cached entries."""
        self.videos.clear()
        self.tags.clear()
        self.programs.clear()

    def __iter__(self) -> Iterator["Video"]:
        return iter(list(self.videos.values()))

    def __len__(self) -> int:
        """Return the number of cached videos."""
        return len(self.videos)

    def __bool__(self) -> bool:
        return bool(self.videos)
