"""Command line interface package."""

from credname.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
