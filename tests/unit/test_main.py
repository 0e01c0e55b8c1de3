"""Tests for the piksel package entry point."""

from unittest.mock import patch, MagicMock

from piksel.__main__ import (
    setup_logging,
    run_command,
    main,
)
from piksel.api.exceptions import ConfigurationError
from piksel.config import CLIArgs
from piksel.status import AssetStatus


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self):
        """Sets up stderr and file sinks."""
        with patch("piksel.__main__.logger") as mock_logger:
            setup_logging(debug=False)
            mock_logger.remove.assert_called_once()
            assert mock_logger.add.call_count == 2
            assert mock_logger.add.call_args_list[0].kwargs["level"] == "INFO"

    def test_setup_logging_debug(self):
        """Debug mode logs debug messages to stderr."""
        with patch("piksel.__main__.logger") as mock_logger:
            setup_logging(debug=True)
            assert mock_logger.add.call_args_list[0].kwargs["level"] == "DEBUG"


class TestRunCommand:
    """Tests for run_command function."""

    def test_latest(self):
        """latest prints the videos."""
        client = MagicMock()
        console = MagicMock()
        client.get_latest_videos.return_value = {"a": MagicMock()}

        assert run_command(client, CLIArgs(command="latest"), console) == 0
        console.print_videos.assert_called_once()

    def test_latest_empty(self):
        """No videos gives exit code 1."""
        client = MagicMock()
        console = MagicMock()
        client.get_latest_videos.return_value = None

        assert run_command(client, CLIArgs(command="latest"), console) == 1
        console.print_warning.assert_called_once()

    def test_status(self):
        """status prints the asset status."""
        client = MagicMock()
        console = MagicMock()
        client.check_asset_status.return_value = AssetStatus.READY

        assert run_command(client, CLIArgs(command="status", target="42"), console) == 0
        client.check_asset_status.assert_called_once_with("42")
        console.print_status.assert_called_once_with("42", AssetStatus.READY)

    def test_video_not_found(self):
        """Unknown videos give exit code 1."""
        client = MagicMock()
        console = MagicMock()
        client.get_video_by_vid.return_value = None

        assert run_command(client, CLIArgs(command="video", target="x"), console) == 1
        console.print_error.assert_called_once()

    def test_tags(self):
        """tags prints one line per tag."""
        client = MagicMock()
        console = MagicMock()
        client.get_tag_menu.return_value = {"surf": "surf", "ski": "ski"}

        assert run_command(client, CLIArgs(command="tags"), console) == 0
        assert console.print.call_count == 2


class TestMain:
    """Tests for main function."""

    def test_configuration_error(self):
        """Configuration errors give exit code 2."""
        with patch("piksel.__main__.setup_logging"), \
             patch("piksel.__main__.ConsoleUI") as mock_console, \
             patch("piksel.__main__.PikselConfig") as mock_config:
            mock_config.from_env.side_effect = ConfigurationError("missing token")

            assert main(["latest"]) == 2
            mock_console.return_value.print_error.assert_called_once_with("missing token")

    def test_debug_flag(self):
        """--debug forces debug mode on the configuration."""
        with patch("piksel.__main__.setup_logging") as mock_logging, \
             patch("piksel.__main__.ConsoleUI"), \
             patch("piksel.__main__.PikselConfig") as mock_config, \
             patch("piksel.__main__.PikselClient") as mock_client, \
             patch("piksel.__main__.run_command", return_value=0) as mock_run:
            config = mock_config.from_env.return_value

            assert main(["--debug", "categories"]) == 0

            mock_logging.assert_called_once_with(True)
            assert config.debug is True
            mock_client.assert_called_once_with(config)
            mock_run.assert_called_once()
