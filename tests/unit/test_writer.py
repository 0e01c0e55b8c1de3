"""Tests for mutation requests."""

from piksel.api.writer import MutationResult, MutationWriter, deep_merge


class TestMutationResult:
    """Tests for MutationResult."""

    def test_ok(self):
        """Successful results are truthy and prefixed."""
        result = MutationResult.ok("unpublish", "done")
        assert result
        assert result.message == "[unpublish] done"
        assert result.to_dict() == {"success": True, "message": "[unpublish] done"}

    def test_failed(self):
        """Failed results are falsy and serialize under 'failure'."""
        result = MutationResult.failed("unpublish", "nope")
        assert not result
        assert result.to_dict() == {"failure": True, "message": "[unpublish] nope"}


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_nested_merge(self):
        """Nested mappings are merged key by key."""
        base = {"request": {"ws_asset": {"metadatas": {"a": 1}}}}
        override = {"request": {"ws_asset": {"assetid": 42}}}

        assert deep_merge(base, override) == {
            "request": {"ws_asset": {"metadatas": {"a": 1}, "assetid": 42}}
        }

    def test_override_wins(self):
        """Scalars of the override win."""
        assert deep_merge({"a": 1, "b": 2}, {"a": 3}) == {"a": 3, "b": 2}


class TestMutationWriter:
    """Tests for MutationWriter."""

    def test_urls(self, config, mock_http):
        """Service and resource URLs."""
        writer = MutationWriter(config, mock_http)

        assert writer.services_url == "https://api-ovp.piksel.com/services/index.php?&mode=json"
        assert writer.resource_url("ws_asset", "put") == (
            "https://ovp.piksel.com/ws/ws_asset/mode/json/apiv/5.0?method=put&"
        )

    def test_build_request(self, config, mock_http):
        """Requests carry authentication and header blocks."""
        writer = MutationWriter(config, mock_http)

        request = writer.build_request("user-token", "ws_program", {"programUuid": "p1"})

        assert request["request"]["authentication"] == {
            "app_token": "app-token",
            "client_token": "client-token",
            "user_token": "user-token",
        }
        assert request["request"]["header"] == {
            "header_version": 1,
            "api_version": "5",
            "no_cache": True,
        }
        assert request["request"]["ws_program"] == {"programUuid": "p1"}

    def test_build_request_with_extras(self, config, mock_http):
        """Extras are merged under the envelope."""
        writer = MutationWriter(config, mock_http)
        extras = {"request": {"ws_asset": {"metadatas": {"in_default_project": True}}}}

        request = writer.build_request("t", "ws_asset", {"assetid": 42}, extras)

        assert request["request"]["ws_asset"] == {
            "assetid": 42,
            "metadatas": {"in_default_project": True},
        }
        assert request["request"]["authentication"]["user_token"] == "t"

    def test_send_success(self, config, mock_http):
        """A success response gives a successful result."""
        mock_http.send_json.return_value = {"response": {"success": {"code": 1}}}
        writer = MutationWriter(config, mock_http)

        result = writer.send("PUT", "https://x", {}, "unpublish", "asset 42 unpublished")

        assert result.success
        assert result.message == "[unpublish] asset 42 unpublished"
        mock_http.send_json.assert_called_once_with("PUT", "https://x", {})

    def test_send_failure_reason(self, config, mock_http):
        """The failure reason is reported."""
        mock_http.send_json.return_value = {"response": {"failure": {"reason": "Forbidden"}}}
        writer = MutationWriter(config, mock_http)

        result = writer.send("PUT", "https://x", {}, "unpublish", "ok")

        assert not result.success
        assert result.message == "[unpublish] Forbidden"

    def test_send_failure_without_reason(self, config, mock_http):
        """A failure without reason gets the default message."""
        mock_http.send_json.return_value = {"response": {"failure": {}}}
        writer = MutationWriter(config, mock_http)

        result = writer.send("DELETE", "https://x", {}, "delete", "ok")

        assert result.message == "[delete] an error occurred during execution"

    def test_send_unexpected_body(self, config, mock_http):
        """Undecodable replies are failures."""
        mock_http.send_json.return_value = None
        writer = MutationWriter(config, mock_http)

        assert not writer.send("POST", "https://x", {}, "create", "ok").success
