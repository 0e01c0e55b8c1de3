"""User interface components."""

from piksel.ui.console import ConsoleUI

__all__ = ["ConsoleUI"]
