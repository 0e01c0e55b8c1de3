"""Configuration and CLI handling."""

from piksel.config.manager import (
    PikselConfig,
    ValidationResult,
)
from piksel.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    args_to_cli_args,
)

__all__ = [
    "PikselConfig",
    "ValidationResult",
    "CLIArgs",
    "create_parser",
    "parse_arguments",
    "args_to_cli_args",
]
