"""Command line interface for credname."""

import sys
from typing import final

from credname.features.naming import CredentialNameError
from credname.platform.logging import logger
from credname.ui.cli.args import ArgumentParser
from credname.ui.cli.args.options import CLIArgs, ConfigureArgs, ServiceInstanceArgs
from credname.ui.cli.commands import ConfigureCommand, ServiceInstanceCommand, SimpleCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ServiceInstanceArgs):
                _ = ServiceInstanceCommand(args).execute()
            elif isinstance(args, ConfigureArgs):
                _ = ConfigureCommand(args).execute()
            else:
                _ = SimpleCommand(args).execute()

        except CredentialNameError as e:
            logger.error("%s", e, extra={"markup": False})
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", e, extra={"markup": False})
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
