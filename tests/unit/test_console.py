"""Tests for console UI wrapper."""

from unittest.mock import patch

from rich.table import Table

from piksel.models.category import Category
from piksel.models.video import Video
from piksel.status import AssetStatus
from piksel.ui.console import ConsoleUI


class TestConsoleUI:
    """Tests for ConsoleUI class."""

    def test_initialization(self):
        """ConsoleUI initializes with Rich Console."""
        ui = ConsoleUI()
        assert ui.console is not None

    def test_print_delegates_to_console(self):
        """print() delegates to Rich Console."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.print("test message")
            mock_print.assert_called_once_with("test message")

    def test_print_error(self):
        """print_error() prints with error styling."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.print_error("Error message")
            args = mock_print.call_args[0][0]
            assert "Error message" in args
            assert "red" in args

    def test_print_warning(self):
        """print_warning() prints with warning styling."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.print_warning("Warning message")
            args = mock_print.call_args[0][0]
            assert "Warning message" in args
            assert "yellow" in args

    def test_message_helpers_documented(self):
        """Message helpers carry their one-line docstrings."""
        assert ConsoleUI.print_warning.__doc__ == "Print a warning message with yellow styling."
        assert ConsoleUI.print_error.__doc__ == "Print an error message with red styling."

    def test_create_table(self):
        """create_table() adds the columns."""
        table = ConsoleUI().create_table("Videos", ["ID", "Title"])
        assert isinstance(table, Table)
        assert len(table.columns) == 2


class TestEntityOutput:
    """Tests for entity printing."""

    def test_print_videos(self, asset_payload):
        """Videos are printed as one table."""
        ui = ConsoleUI()
        video = Video(asset_payload)
        with patch.object(ui.console, 'print') as mock_print:
            ui.print_videos({video.slug: video})
            table = mock_print.call_args[0][0]
            assert isinstance(table, Table)
            assert table.row_count == 1

    def test_print_categories(self):
        """Categories are printed as one table."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.print_categories({"sport": Category("Sport")})
            assert mock_print.call_args[0][0].row_count == 1

    def test_print_status(self):
        """The status is printed with its color."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.print_status("42", AssetStatus.READY)
            args = mock_print.call_args[0][0]
            assert "Asset 42" in args
            assert "[green]ready[/green]" in args
