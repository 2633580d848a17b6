"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from credname.config.config import Config
from credname.platform.logging import logger, setup_logger
from credname.ui.cli.args.options import CLIArgs, ConfigureArgs, ServiceInstanceArgs, SimpleArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="credname",
            description="credname - Build canonical credential names for a credential-management service.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        service_parser = subparsers.add_parser(
            "service-instance",
            help="Build a /c/broker/offering/binding/credential name",
        )
        _ = service_parser.add_argument(
            "--broker",
            dest="service_broker_name",
            type=str,
            metavar="NAME",
            help="Service broker name (defaults to the configured value)",
        )
        _ = service_parser.add_argument(
            "--offering",
            dest="service_offering_name",
            type=str,
            metavar="NAME",
            help="Service offering name (defaults to the configured value)",
        )
        _ = service_parser.add_argument(
            "--binding-id",
            dest="service_binding_id",
            type=str,
            required=True,
            metavar="GUID",
            help="Service binding GUID",
        )
        _ = service_parser.add_argument(
            "--credential",
            dest="credential_name",
            type=str,
            required=True,
            metavar="NAME",
            help="Name of the binding credential",
        )
        ArgumentParser._add_output_flags(service_parser)

        simple_parser = subparsers.add_parser(
            "simple",
            help="Build a name from arbitrary path segments",
        )
        _ = simple_parser.add_argument(
            "segments",
            nargs="+",
            metavar="SEGMENT",
            help="Ordered name segments",
        )
        ArgumentParser._add_output_flags(simple_parser)

        configure_parser = subparsers.add_parser(
            "configure",
            help="Save default broker/offering names and the log file to the config file",
        )
        _ = configure_parser.add_argument("--broker", dest="service_broker_name", metavar="NAME")
        _ = configure_parser.add_argument("--offering", dest="service_offering_name", metavar="NAME")
        _ = configure_parser.add_argument("--log-file", dest="log_file", metavar="PATH")
        ArgumentParser._add_verbosity_flags(configure_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: On usage errors or unsupported commands.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "service-instance":
            return ArgumentParser._process_service_instance(parsed_args, configuration)

        if command == "simple":
            return SimpleArgs(
                command="simple",
                segments=list(parsed_args.segments),
                show_segments=parsed_args.segments_table,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        if command == "configure":
            return ConfigureArgs(
                command="configure",
                service_broker_name=parsed_args.service_broker_name,
                service_offering_name=parsed_args.service_offering_name,
                log_file=Path(parsed_args.log_file) if parsed_args.log_file else None,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_output_flags(parser: argparse.ArgumentParser) -> None:
        """Apply output options shared by every subcommand."""

        _ = parser.add_argument(
            "--segments",
            dest="segments_table",
            action="store_true",
            help="Show the ordered segments as a table instead of the bare name",
        )
        ArgumentParser._add_verbosity_flags(parser)

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )

    @staticmethod
    def _process_service_instance(
        parsed_args: argparse.Namespace, configuration: Config
    ) -> ServiceInstanceArgs:
        broker = parsed_args.service_broker_name
        if broker is None:
            broker = configuration.service_broker_name
        offering = parsed_args.service_offering_name
        if offering is None:
            offering = configuration.service_offering_name

        return ServiceInstanceArgs(
            command="service-instance",
            service_broker_name=broker,
            service_offering_name=offering,
            service_binding_id=parsed_args.service_binding_id,
            credential_name=parsed_args.credential_name,
            show_segments=parsed_args.segments_table,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
