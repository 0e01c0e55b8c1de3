"""Tests for the session cache."""

from piksel.models.cache import SessionCache, VideoCollection
from piksel.models.video import Video


class TestSessionCache:
    """Tests for SessionCache."""

    def test_empty(self):
        """A new cache is empty and falsy."""
        cache = SessionCache()
        assert len(cache) == 0
        assert not cache
        assert cache.get("missing") is None

    def test_set_and_get(self, asset_payload):
        """Videos are stored under their slug."""
        cache = SessionCache()
        video = cache.set(Video(asset_payload))

        assert cache.get("summer-campaign") is video
        assert len(cache) == 1
        assert list(cache) == [video]

    def test_find_by_id_compares_as_text(self, asset_payload):
        """Ids from URLs (text) match numeric asset ids."""
        cache = SessionCache()
        video = cache.set(Video(asset_payload))

        assert cache.find_by_id("42") is video
        assert cache.find_by_id(43) is None

    def test_collections_created_on_demand(self):
        """Tag and project collections start empty."""
        cache = SessionCache()
        collection = cache.tag("surf")

        assert isinstance(collection, VideoCollection)
        assert collection.videos is None
        assert collection.total_count is None
        assert cache.tag("surf") is collection
        assert cache.project("uuid-1") is not collection

    def test_clear(self, asset_payload):
        """clear empties every collection."""
        cache = SessionCache()
        cache.set(Video(asset_payload))
        cache.tag("surf").total_count = 3

        cache.clear()

        assert len(cache) == 0
        assert cache.tags == {}
