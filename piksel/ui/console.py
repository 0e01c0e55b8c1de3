"""Console UI wrapper using Rich library."""

from typing import Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from piksel.models.category import Category
from piksel.models.video import Video
from piksel.status import AssetStatus

STATUS_STYLES = {
    AssetStatus.NOT_FOUND: 'red',
    AssetStatus.ERROR: 'red',
    AssetStatus.SHARED: 'magenta',
    AssetStatus.READY: 'green',
    AssetStatus.UPDATED: 'cyan',
    AssetStatus.NOT_READY: 'yellow',
}


class ConsoleUI:
    """
    Wrapper for Rich Console providing styled output methods.

    Centralizes console output with consistent styling for messages and
    for the Piksel entities (videos, categories, asset status).
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize with a Rich Console."""
        self.console = console or Console()

    def print(self, *args, **kwargs) -> None:
        """Print to console (delegates to Rich Console)."""
        self.console.print(*args, **kwargs)

    def print_warning(self, message: str) -> None:
        """Print a warning message with yellow styling."""
        self.console.print(f"[yellow]⚠️  {message}[/yellow]")

    def print_error(self, message: str) -> None:
        """Print an error message with red styling."""
        self.console.print(f"[red]❌ {message}[/red]")

    def print_panel(
        self,
        content: str,
        title: str = "",
        border_style: str = "blue"
    ) -> None:
        """
        Print content in a bordered panel.

        Args:
            content: Panel content.
            title: Panel title.
            border_style: Border color/style.
        """
        panel = Panel(content, title=title, border_style=border_style)
        self.console.print(panel)

    def create_table(
        self,
        title: str,
        columns: Optional[List[str]] = None
    ) -> Table:
        """
        Create a Rich Table with optional columns.

        Args:
            title: Table title.
            columns: List of column headers.

        Returns:
            Rich Table instance.
        """
        table = Table(title=title, show_header=True, header_style="bold magenta")
        if columns:
            for col in columns:
                table.add_column(col)
        return table

    def print_videos(self, videos: Dict[str, Video], title: str = "Videos") -> None:
        """Print videos as a table (id, title, duration, size, published)."""
        table = self.create_table(title, ["ID", "Title", "Duration", "Size", "Published"])
        for video in videos.values():
            table.add_row(
                str(video.id),
                video.title,
                video.formatted_duration,
                video.formatted_biggest_size(),
                "yes" if video.is_published else "no",
            )
        self.console.print(table)

    def print_categories(self, categories: Dict[str, Category]) -> None:
        """Print categories as a table (slug, title)."""
        table = self.create_table("Categories", ["Slug", "Title"])
        for slug, category in categories.items():
            table.add_row(slug, category.title)
        self.console.print(table)

    def print_video(self, video: Video) -> None:
        """Print the details of one video in a panel."""
        tags = ", ".join(video.tags or [])
        self.print_panel(
            f"[bold]{video.title}[/bold]\n"
            f"ID: [cyan]{video.id}[/cyan]\n"
            f"Slug: [cyan]{video.slug}[/cyan]\n"
            f"Duration: {video.formatted_duration or '-'}\n"
            f"Size: {video.formatted_biggest_size() or '-'}\n"
            f"Tags: {tags or '-'}\n"
            f"Source: {video.source_url or '-'}\n"
            f"Download: {video.download_url or '-'}",
            title="Video",
        )

    def print_status(self, asset_id: str, status: AssetStatus) -> None:
        """Print the status of an asset with its color."""
        style = STATUS_STYLES.get(status, 'white')
        self.console.print(f"Asset {asset_id}: [{style}]{status.value}[/{style}]")
