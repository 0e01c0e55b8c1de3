"""Base entity shared by videos and categories."""

from datetime import datetime
from typing import Any, Optional

from piksel.utils.text import slugify


class Entity:
    """
    An identified, titled and slugged object.

    The slug is derived from the title unless given explicitly. The id is
    first-write-wins: once set, later assignments are ignored.

    Attributes:
        title: Display title.
        slug: URL slug.
        last_modified: Time of the last change of the entity.
    """

    def __init__(
        self,
        title: str,
        slug: Optional[str] = None,
        id: Optional[Any] = None
    ) -> None:
        self.title = title
        self.slug = slugify(slug or title)
        self._id: Optional[Any] = None
        self.last_modified: datetime = datetime.now()
        self.assign_id(id)

    @property
    def id(self) -> Optional[Any]:
        return self._id

    def assign_id(self, value: Optional[Any]) -> Optional[Any]:
        """
        Set the id if it is not set yet.

        Args:
            value: Candidate id; empty values are ignored.

        Returns:
            The current id.
        """
        if not self._id and value:
            self._id = value
            self.touch()
        return self._id

    def touch(self, when: Optional[datetime] = None) -> None:
        """Update last_modified (to now by default)."""
        self.last_modified = when or datetime.now()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, slug={self.slug!r})"
