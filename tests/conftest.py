"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock, Mock

import pytest

from piksel.config.manager import PikselConfig


@pytest.fixture
def success_body():
    """Build the decoded body of a successful Piksel response."""
    def build(key, payload, code=304):
        return {"response": {"success": {"code": code}, key: payload}}
    return build


@pytest.fixture
def failure_body():
    """Build the decoded body of a failed Piksel response."""
    def build(code=303, reason="Asset not found"):
        return {"response": {"failure": {"code": code, "reason": reason}}}
    return build


@pytest.fixture
def config_mapping():
    """Piksel configuration in the option mapping format."""
    return {
        "baseURL": "https://api-ovp.piksel.com",
        "token": "app-token",
        "clientToken": "client-token",
        "searchUUID": "project-uuid",
        "refIDPrefix": "",
        "clientName": "My Client",
        "api": {"username": "user", "password": "secret"},
        "debug": False,
    }


@pytest.fixture
def config(config_mapping):
    """A valid PikselConfig."""
    return PikselConfig.from_mapping(config_mapping)


@pytest.fixture
def mock_http():
    """HttpClient double; set get_json/send_json return values per test."""
    http = Mock()
    http.get_json.return_value = None
    http.send_json.return_value = None
    return http


@pytest.fixture
def asset_payload():
    """A ws_asset payload."""
    return {
        "assetid": 42,
        "title": "Summer Campaign!",
        "description": "Our summer campaign",
        "dateStart": "2015-06-12 10:00:00",
        "date_start": "2015-06-12 10:00:00",
        "thumbnailUrl": "https://cdn.example.com/thumb.jpg?w=640&h=480",
        "m3u8AndroidURL": "https://cdn.example.com/video.m3u8",
        "tags": "summer, beach, sun",
        "isPublished": 1,
        "assetFiles": [{
            "duration": 125.6,
            "filesize": 26214400,
            "full_cdn_path": "https://cdn.example.com/video.mp4",
        }],
        "metadatas": {},
    }


@pytest.fixture
def program_payload():
    """A ws_program payload (nested asset)."""
    return {
        "uuid": "prog-uuid-1",
        "assetid": 77,
        "Title": "Winter Program",
        "Description": "A program",
        "dateStart": "2015-12-01 08:00:00",
        "thumbnailUrl": "https://cdn.example.com/w640/h480/thumb.jpg",
        "duration": 3725,
        "isPublished": "1",
        "asset": {
            "m3u8AndroidURL": "https://cdn.example.com/program.m3u8",
            "captions": [{"lang": "fr"}],
        },
    }


@pytest.fixture
def mock_providers():
    """MagicMock doubles for every provider used by the client."""
    return {
        "asset_provider": MagicMock(),
        "program_provider": MagicMock(),
        "program_search_provider": MagicMock(),
        "categories_provider": MagicMock(),
        "tag_menu_provider": MagicMock(),
        "thumbnail_provider": MagicMock(),
        "user_token_provider": MagicMock(),
        "writer": MagicMock(),
    }
