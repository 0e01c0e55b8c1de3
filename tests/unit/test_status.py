"""Tests for asset status classification."""

import pytest

from piksel.status import AssetStatus, classify_asset_status


class TestClassifyAssetStatus:
    """Decision table of classify_asset_status."""

    @pytest.mark.parametrize(
        "found,encoded,has_thumbnail,in_default,shared,expected",
        [
            (False, True, True, True, True, AssetStatus.NOT_FOUND),
            (True, False, False, False, False, AssetStatus.ERROR),
            (True, False, False, True, True, AssetStatus.ERROR),
            (True, True, True, False, True, AssetStatus.SHARED),
            (True, True, None, False, True, AssetStatus.SHARED),
            (True, True, True, False, False, AssetStatus.READY),
            (True, True, None, False, False, AssetStatus.READY),
            (True, True, True, True, False, AssetStatus.UPDATED),
            (True, False, None, True, False, AssetStatus.UPDATED),
            (True, False, None, False, False, AssetStatus.NOT_READY),
            (True, False, True, False, False, AssetStatus.NOT_READY),
            (True, True, False, True, False, AssetStatus.NOT_READY),
        ],
    )
    def test_rules(self, found, encoded, has_thumbnail, in_default, shared, expected):
        """The first matching rule wins."""
        assert classify_asset_status(found, encoded, has_thumbnail, in_default, shared) is expected

    def test_values(self):
        """Statuses serialize to their wire names."""
        assert AssetStatus.NOT_READY.value == "not ready"
        assert AssetStatus.NOT_FOUND == "not found"
