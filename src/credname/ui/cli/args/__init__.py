"""Command line argument handling package."""

from credname.ui.cli.args.parser import ArgumentParser
from credname.ui.cli.args.options import CLIArgs, ConfigureArgs, ServiceInstanceArgs, SimpleArgs

__all__ = ["ArgumentParser", "CLIArgs", "ConfigureArgs", "ServiceInstanceArgs", "SimpleArgs"]
