"""Tests for the query builders."""

import pytest

from piksel.api.queries import (
    ResourceQuery,
    SortDirection,
    asset_associations_query,
    asset_by_category_query,
    asset_by_tag_query,
    asset_by_title_query,
    asset_by_vid_query,
    asset_list_query,
    encode_secret,
    program_by_project_query,
    program_by_ref_query,
    program_by_uuid_query,
    program_search_query,
    thumbnail_query,
    user_token_path,
)


class TestResourceQuery:
    """Tests for ResourceQuery."""

    def test_defaults(self):
        """Default query is the first page of 20, newest first."""
        query = ResourceQuery()
        assert query.start == 0
        assert query.limit == 20
        assert query.sort_by == "date_start"
        assert query.sort_dir is SortDirection.DESC

    def test_end_is_inclusive(self):
        """end = start + limit - 1."""
        assert ResourceQuery(start=40, limit=20).end == 59
        assert ResourceQuery(start=0, limit=1).end == 0

    @pytest.mark.parametrize("limit", [0, -5])
    def test_rejects_non_positive_limit(self, limit):
        """A non-positive limit is rejected at construction."""
        with pytest.raises(ValueError):
            ResourceQuery(limit=limit)

    def test_rejects_negative_start(self):
        """A negative start is rejected at construction."""
        with pytest.raises(ValueError):
            ResourceQuery(start=-1)

    def test_sort_dir_string_coerced(self):
        """sort_dir accepts plain strings."""
        assert ResourceQuery(sort_dir="asc").sort_dir is SortDirection.ASC

    def test_invalid_sort_dir(self):
        """Unknown sort directions are rejected."""
        with pytest.raises(ValueError):
            ResourceQuery(sort_dir="sideways")

    def test_program_defaults(self):
        """Program queries sort by sortnum."""
        query = ResourceQuery.for_programs()
        assert query.sort_by == "sortnum"
        assert query.sort_dir is SortDirection.DESC


class TestAssetQueries:
    """Tests for asset query builders."""

    def test_asset_list(self):
        """Default asset list query."""
        assert asset_list_query(ResourceQuery()) == (
            "start=0&end=19&sortby=date_start&sortdir=desc"
            "&isPublished=true&include_shared=true&assetfiles=true"
        )

    def test_asset_list_including_unpublished(self):
        """published_only=False drops the publication filter."""
        assert "isPublished" not in asset_list_query(ResourceQuery(), published_only=False)

    def test_tag_is_wildcarded_and_encoded(self):
        """Tag filter is wrapped in % and percent-encoded."""
        query = asset_by_tag_query("beach party", ResourceQuery())
        assert "tags=%25beach+party%25" in query
        assert query.endswith("include_shared=true&assetfiles=true")

    def test_category(self):
        """Category filter uses the Categories metadata."""
        query = asset_by_category_query("Summer campaign", ResourceQuery(start=20, limit=10))
        assert "start=20&end=29" in query
        assert "metadata=Categories&metavalue=Summer+campaign" in query

    def test_vid_numeric_is_asset_id(self):
        """Numeric vids are asset ids."""
        assert asset_by_vid_query(42).startswith("a=42&isPublished=true&")

    def test_vid_text_is_reference_id(self):
        """Non numeric vids are reference ids."""
        assert asset_by_vid_query("k1234abc").startswith("r=k1234abc&")

    def test_vid_forced_reference_id(self):
        """use_reference_id forces the reference id selector."""
        assert asset_by_vid_query(42, use_reference_id=True).startswith("r=42&")

    def test_vid_unpublished(self):
        """published_only=False drops the publication filter."""
        query = asset_by_vid_query(42, published_only=False)
        assert query == "a=42&include_shared=true&assetfiles=true"

    def test_title(self):
        """Title is percent-encoded."""
        assert asset_by_title_query("a b&c").startswith("title=a+b%26c&")

    def test_associations(self):
        """Associations query selects by asset id."""
        assert asset_associations_query(42) == "assetId=42&start=0&end=19"


class TestProgramQueries:
    """Tests for program query builders."""

    def test_by_project(self):
        """Program list by project."""
        assert program_by_project_query("uuid-1", ResourceQuery.for_programs(0, 1)) == (
            "p=uuid-1&start=0&end=0&sortby=sortnum&sortdir=desc"
            "&include_viewcount=true&include_details=true"
        )

    def test_by_ref(self):
        """Program list by reference id."""
        assert program_by_ref_query("ref", ResourceQuery.for_programs()).startswith("refid=ref&")

    def test_by_uuid(self):
        """Single program by uuid."""
        assert program_by_uuid_query("uuid-1") == "v=uuid-1"

    def test_search_encodes_terms(self):
        """Search terms are base64 encoded, sort parameters camelCased."""
        query = program_search_query("surf", "uuid-1", ResourceQuery(limit=5, sort_by="programTitle"))
        assert "s=c3VyZg%3D%3D&" in query
        assert query.startswith("p=uuid-1&field&")
        assert "sortBy=programTitle&sortDir=desc" in query


class TestOtherQueries:
    """Tests for thumbnail and user token builders."""

    def test_thumbnail(self):
        """Thumbnail query selects by asset id."""
        assert thumbnail_query(42) == "assetId=42"

    def test_user_token_path(self):
        """Password is base64 then percent-encoded in a slash path."""
        path = user_token_path("user", "s3cret?")
        assert path.startswith("/u/user/p/")
        assert path == f"/u/user/p/{encode_secret('s3cret?')}"

    def test_encode_secret_escapes_padding(self):
        """Base64 padding is percent-encoded."""
        assert encode_secret("a") == "YQ%3D%3D"
