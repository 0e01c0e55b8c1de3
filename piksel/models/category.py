"""Category entity."""

from typing import Any, Dict, Mapping, Optional

from piksel.models.base import Entity


class Category(Entity):
    """
    A video category (an option of the `Categories` custom metadata).

    The total count is set once; videos can only be attached to a category
    known to contain some.

    Attributes:
        total_count: Number of videos in the category (None until known).
    """

    def __init__(
        self,
        title: str,
        slug: Optional[str] = None,
        id: Optional[Any] = None,
        total_count: Optional[int] = None
    ) -> None:
        super().__init__(title, slug, id)
        self.total_count: Optional[int] = None
        self._videos: Optional[Dict[str, Any]] = None
        self.set_total_count(total_count)

    def set_total_count(self, total_count: Optional[int] = None) -> Optional[int]:
        """
        Set the total count if it is not known yet.

        Zero is a known count; None leaves the count unknown.

        Returns:
            The current total count.
        """
        if self.total_count is None and total_count is not None:
            self.total_count = int(total_count)
            self.touch()
        return self.total_count

    @property
    def videos(self) -> Optional[Dict[str, Any]]:
        """Videos keyed by slug, None if none were attached."""
        return self._videos

    def set_videos(self, videos: Any) -> Optional[Dict[str, Any]]:
        """
        Attach videos keyed by slug.

        Ignored while the category is not known to contain videos or when
        `videos` is not a mapping.

        Returns:
            The current videos.
        """
        if self.total_count and isinstance(videos, Mapping):
            self._videos = dict(videos)
            self.touch()
        return self._videos
