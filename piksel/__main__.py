"""Entry point for the piksel package.

This module provides the command-line entry point of the Piksel client.
Run with: python -m piksel <command>
"""

import sys
from typing import List, Optional

from loguru import logger

from piksel.api.exceptions import PikselError
from piksel.client import PikselClient
from piksel.config import (
    CLIArgs,
    PikselConfig,
    parse_arguments,
    args_to_cli_args,
)
from piksel.ui import ConsoleUI


def setup_logging(debug: bool = False) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging.
    """
    logger.remove()
    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.add(
        "piksel.log",
        rotation="10 MB",
        retention="7 days",
        level="DEBUG",
    )


def run_command(client: PikselClient, cli_args: CLIArgs, console: ConsoleUI) -> int:
    """
    Run one CLI command.

    Args:
        client: Piksel client.
        cli_args: Parsed CLI arguments.
        console: Console UI instance.

    Returns:
        Exit code (0 for success, 1 when nothing was found).
    """
    command = cli_args.command

    if command == 'categories':
        categories = client.get_categories()
        if not categories:
            console.print_warning("No categories defined")
            return 1
        console.print_categories(categories)

    elif command == 'tags':
        tags = client.get_tag_menu()
        if not tags:
            console.print_warning("No tag menu defined")
            return 1
        for tag in tags:
            console.print(f"• {tag}")

    elif command == 'latest':
        videos = client.get_latest_videos()
        if not videos:
            console.print_warning("No videos found")
            return 1
        console.print_videos(videos, title="Latest videos")

    elif command == 'status':
        console.print_status(cli_args.target, client.check_asset_status(cli_args.target))

    elif command == 'video':
        video = client.get_video_by_vid(cli_args.target)
        if video is None:
            console.print_error(f"Video {cli_args.target} not found")
            return 1
        console.print_video(video)

    return 0


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point of the Piksel CLI.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    namespace = parse_arguments(args)
    cli_args = args_to_cli_args(namespace)

    setup_logging(cli_args.debug)
    console = ConsoleUI()

    try:
        config = PikselConfig.from_env(cli_args.env_file)
        if cli_args.debug:
            config.debug = True
        client = PikselClient(config)
        return run_command(client, cli_args, console)
    except PikselError as e:
        console.print_error(str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
