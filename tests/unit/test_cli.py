"""Tests for CLI argument parsing."""

import pytest
from pathlib import Path

from piksel.config.cli import (
    create_parser,
    parse_arguments,
    args_to_cli_args,
    CLIArgs,
)


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self):
        """Creates an ArgumentParser."""
        parser = create_parser()
        assert parser.prog == "piksel"

    def test_command_required(self):
        """A command must be given."""
        with pytest.raises(SystemExit):
            create_parser().parse_args([])

    def test_unknown_command(self):
        """Unknown commands are rejected."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["upload"])


class TestParseArguments:
    """Tests for parse_arguments function."""

    def test_latest(self):
        """Commands without target."""
        args = parse_arguments(["latest"])
        assert args.command == "latest"
        assert args.debug is False
        assert args.env_file is None

    def test_status_target(self):
        """status takes an asset id."""
        args = parse_arguments(["status", "42"])
        assert args.command == "status"
        assert args.target == "42"

    def test_status_requires_target(self):
        """status without asset id is rejected."""
        with pytest.raises(SystemExit):
            parse_arguments(["status"])

    def test_global_options(self):
        """--debug and --env-file come before the command."""
        args = parse_arguments(["--debug", "--env-file", "prod.env", "video", "abc"])
        assert args.debug is True
        assert args.env_file == "prod.env"
        assert args.target == "abc"


class TestArgsToCliArgs:
    """Tests for args_to_cli_args function."""

    def test_converts_namespace(self):
        """Namespace is converted to CLIArgs."""
        cli_args = args_to_cli_args(parse_arguments(["--env-file", "prod.env", "status", "42"]))

        assert cli_args == CLIArgs(
            command="status",
            target="42",
            debug=False,
            env_file=Path("prod.env"),
        )

    def test_missing_target(self):
        """Commands without target get None."""
        cli_args = args_to_cli_args(parse_arguments(["tags"]))
        assert cli_args.target is None
        assert cli_args.env_file is None
