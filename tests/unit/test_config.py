"""Tests for configuration loading and validation."""

import pytest

from piksel.api.exceptions import ConfigurationError
from piksel.config.manager import PikselConfig


class TestFromMapping:
    """Tests for PikselConfig.from_mapping."""

    def test_valid(self, config_mapping):
        """Option names are mapped to attributes."""
        config = PikselConfig.from_mapping(config_mapping)

        assert config.base_url == "https://api-ovp.piksel.com"
        assert config.client_token == "client-token"
        assert config.api_username == "user"
        assert config.api_password == "secret"
        assert config.client_name == "My Client"
        assert config.ref_id_prefix == ""
        assert config.debug is False

    def test_missing_api(self, config_mapping):
        """The api block is required."""
        del config_mapping["api"]
        with pytest.raises(ConfigurationError, match="no API configuration"):
            PikselConfig.from_mapping(config_mapping)

    @pytest.mark.parametrize("option,message", [
        ("baseURL", "no API base URL"),
        ("token", "no account token"),
        ("clientToken", "no client token"),
        ("searchUUID", "no default project UUID"),
    ])
    def test_missing_option(self, config_mapping, option, message):
        """Each missing option has its own message."""
        del config_mapping[option]
        with pytest.raises(ConfigurationError, match=message):
            PikselConfig.from_mapping(config_mapping)

    def test_missing_api_password(self, config_mapping):
        """API credentials are required."""
        config_mapping["api"] = {"username": "user"}
        with pytest.raises(ConfigurationError, match="no api password"):
            PikselConfig.from_mapping(config_mapping)

    def test_first_missing_reported(self, config_mapping):
        """Only the first missing option is reported."""
        del config_mapping["token"]
        del config_mapping["searchUUID"]
        with pytest.raises(ConfigurationError, match="account token"):
            PikselConfig.from_mapping(config_mapping)

    def test_debug_string(self, config_mapping):
        """String flags are interpreted."""
        config_mapping["debug"] = "true"
        assert PikselConfig.from_mapping(config_mapping).debug is True


class TestPikselConfig:
    """Tests for PikselConfig helpers."""

    def test_ws_base_url(self, config):
        """The write host drops the api- prefix."""
        assert config.ws_base_url == "https://ovp.piksel.com"

    def test_validate(self):
        """An empty configuration is invalid."""
        result = PikselConfig().validate()
        assert not result.valid
        assert "base URL" in result.error_message

    def test_ensure_valid_returns_self(self, config):
        """ensure_valid chains."""
        assert config.ensure_valid() is config


class TestFromEnv:
    """Tests for PikselConfig.from_env."""

    @pytest.fixture
    def env(self, monkeypatch):
        values = {
            "PIKSEL_BASE_URL": "https://api-ovp.piksel.com",
            "PIKSEL_TOKEN": "app-token",
            "PIKSEL_CLIENT_TOKEN": "client-token",
            "PIKSEL_SEARCH_UUID": "project-uuid",
            "PIKSEL_API_USERNAME": "user",
            "PIKSEL_API_PASSWORD": "secret",
        }
        for name, value in values.items():
            monkeypatch.setenv(name, value)
        # setenv first so that variables loaded from .env files are undone
        for name in ("PIKSEL_DEBUG", "PIKSEL_FOLDER_ID", "PIKSEL_CLIENT_NAME"):
            monkeypatch.setenv(name, "")
            monkeypatch.delenv(name)
        return values

    def test_from_environment(self, env, tmp_path):
        """Variables are read from the environment."""
        config = PikselConfig.from_env(tmp_path / "missing.env")

        assert config.token == "app-token"
        assert config.api_username == "user"
        assert config.debug is False

    def test_from_env_file(self, env, tmp_path):
        """Variables missing from the environment come from the .env file."""
        env_file = tmp_path / "piksel.env"
        env_file.write_text("PIKSEL_CLIENT_NAME=My Client\nPIKSEL_TOKEN=other\n")

        config = PikselConfig.from_env(env_file)

        assert config.client_name == "My Client"
        assert config.token == "app-token"

    def test_missing_variable(self, env, tmp_path, monkeypatch):
        """Missing variables raise ConfigurationError."""
        monkeypatch.delenv("PIKSEL_TOKEN")
        with pytest.raises(ConfigurationError, match="account token"):
            PikselConfig.from_env(tmp_path / "missing.env")
