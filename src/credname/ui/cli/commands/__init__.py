"""Command execution package for CLI."""

from credname.ui.cli.commands.configure import ConfigureCommand
from credname.ui.cli.commands.name import ServiceInstanceCommand, SimpleCommand

__all__ = ["ConfigureCommand", "ServiceInstanceCommand", "SimpleCommand"]
