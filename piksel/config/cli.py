"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

COMMANDS = ('categories', 'tags', 'status', 'video', 'latest')


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        command: Command to run (categories, tags, status, video or latest).
        target: Asset id for `status`, vid for `video`.
        debug: If True, enable debug mode (uncached requests, URL logs).
        env_file: .env file holding the PIKSEL_* variables.
    """

    command: str = 'latest'
    target: Optional[str] = None
    debug: bool = False
    env_file: Optional[Path] = None


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='piksel',
        description="""
        Query a Piksel account: list categories, tags and latest videos,
        show a video or check the processing status of an asset.
        """
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug mode (no HTTP cache, requested URLs logged)"
    )

    parser.add_argument(
        '--env-file',
        default=None,
        help="file holding the PIKSEL_* variables (default: ./.env)"
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('categories', help="list the categories of the account")
    subparsers.add_parser('tags', help="list the tags of the tag menu")
    subparsers.add_parser('latest', help="list the latest videos of the default project")

    status = subparsers.add_parser('status', help="show the processing status of an asset")
    status.add_argument('target', metavar='ASSET_ID', help="Piksel asset id")

    video = subparsers.add_parser('video', help="show a video")
    video.add_argument('target', metavar='VID', help="asset id, reference id or program UUID")

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        command=namespace.command,
        target=getattr(namespace, 'target', None),
        debug=namespace.debug,
        env_file=Path(namespace.env_file) if namespace.env_file else None,
    )
