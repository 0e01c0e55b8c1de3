"""Video entity built from a Piksel asset or program payload."""

import json
import math
import re
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from piksel.config.settings import THUMBNAIL_HEIGHT, THUMBNAIL_WIDTH
from piksel.models.base import Entity
from piksel.models.payload import PayloadKind, VideoRecord, to_record

THUMBNAIL_SIZE_PATTERN = re.compile(r'w(=)?(\d{1,4})(&|/)h(=)?(\d{1,4})')
SIZE_UNITS = ('B', 'KB', 'MB', 'GB')


class Video(Entity):
    """
    A Piksel video.

    The payload is resolved once into a :class:`VideoRecord`; the video is
    read-only afterwards, except for the associated data which can be
    attached once.

    Example:
        >>> video = Video({'assetid': 42, 'title': 'Summer Campaign!'})
        >>> video.slug
        'summer-campaign'
    """

    def __init__(self, payload: Mapping[str, Any]) -> None:
        """
        Build a video.

        Args:
            payload: Raw asset or program payload.

        Raises:
            ValueError: If the payload has no asset id.
        """
        self.record: VideoRecord = to_record(payload)
        self._associated_data: Optional[List[Dict[str, Any]]] = None
        super().__init__(self.record.title, id=self.record.asset_id)
        if self.record.modified_at:
            self.touch(self.record.modified_at)

    @property
    def kind(self) -> PayloadKind:
        return self.record.kind

    @property
    def asset_id(self) -> Any:
        return self.record.asset_id

    @property
    def raw(self) -> Dict[str, Any]:
        return self.record.raw

    @property
    def description(self) -> Optional[str]:
        return self.record.description

    @property
    def source_url(self) -> Optional[str]:
        """HLS stream URL (the m3u8 Android rendition)."""
        return self.record.source_url

    @property
    def date_start(self) -> Optional[str]:
        return self.record.date_start

    @property
    def pub_date(self) -> Optional[str]:
        return self.record.date_start

    @property
    def duration(self) -> Optional[float]:
        return self.record.duration

    @property
    def biggest_size(self) -> Optional[float]:
        return self.record.filesize

    @property
    def captions(self) -> Any:
        return self.record.captions

    @property
    def captions_json(self) -> Optional[str]:
        """Captions serialized as JSON, or None without captions."""
        return json.dumps(self.record.captions) if self.record.captions else None

    @property
    def tags(self) -> Optional[List[str]]:
        """Tags of the video, or None if it has none."""
        if not self.record.tags:
            return None
        return str(self.record.tags).split(', ')

    @property
    def is_published(self) -> bool:
        return self.record.is_published

    @property
    def is_downloadable(self) -> bool:
        """True unless the `downloadable` metadata is set to anything but 'true'."""
        if self.record.downloadable is None:
            return True
        return self.record.downloadable == 'true'

    @property
    def download_url(self) -> Optional[str]:
        """CDN URL of the main file, if the video is downloadable."""
        if not self.is_downloadable:
            return None
        return self.record.download_path

    def thumbnail_url(
        self,
        resize: bool = False,
        width: int = THUMBNAIL_WIDTH,
        height: int = THUMBNAIL_HEIGHT
    ) -> Optional[str]:
        """
        Return the thumbnail URL.

        Args:
            resize: Rewrite the size parameters of the URL (w=..&h=.. or
                w../h..) to `width` x `height`.
            width: Thumbnail width.
            height: Thumbnail height.

        Returns:
            The thumbnail URL, None if the video has none.
        """
        url = self.record.thumbnail_url
        if not resize or not url:
            return url

        def replace(match: re.Match) -> str:
            return (
                f"w{match.group(1) or ''}{width}{match.group(3)}"
                f"h{match.group(4) or ''}{height}"
            )

        return THUMBNAIL_SIZE_PATTERN.sub(replace, url)

    @property
    def formatted_duration(self) -> str:
        """Duration as MM:SS, or HH:MM:SS from one hour; '' when unknown."""
        if not self.record.duration:
            return ''
        seconds = int(math.floor(self.record.duration))
        hours, remainder = divmod(seconds, 3600)
        minutes, seconds = divmod(remainder, 60)
        if hours:
            return f'{hours:02d}:{minutes:02d}:{seconds:02d}'
        return f'{minutes:02d}:{seconds:02d}'

    def formatted_biggest_size(self, precision: int = 2) -> str:
        """
        Return the file size in a human readable form.

        Args:
            precision: Number of decimals.

        Returns:
            Size with unit (e.g. '25.3KB'), '' when unknown.
        """
        size = self.record.filesize
        if not size or size <= 0:
            return ''
        exponent = 0
        while exponent < len(SIZE_UNITS) - 1 and size >= 1024 ** (exponent + 1):
            exponent += 1
        value = round(size / (1024 ** exponent), precision)
        text = f'{value:.{max(precision, 0)}f}'
        if '.' in text:
            text = text.rstrip('0').rstrip('.')
        return f'{text}{SIZE_UNITS[exponent]}'

    @property
    def associated_data(self) -> Optional[List[Dict[str, Any]]]:
        """Programs associated to the video, once attached."""
        return self._associated_data

    def attach_associated_data(self, data: Any) -> Optional[List[Dict[str, Any]]]:
        """
        Attach the associations of the video, once.

        Only the `associatedPrograms` entries are kept. Later calls leave
        the attached data unchanged.

        Args:
            data: Payload of the asset associations endpoint.

        Returns:
            The attached programs.
        """
        if self._associated_data is None and isinstance(data, Mapping):
            programs = data.get('associatedPrograms') or []
            self._associated_data = [program for program in programs if program]
            self.touch(datetime.now())
        return self._associated_data
