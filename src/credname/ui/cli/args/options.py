"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ServiceInstanceArgs:
    """Command line arguments for the ``service-instance`` subcommand."""

    command: Literal["service-instance"]
    service_broker_name: str | None
    service_offering_name: str | None
    service_binding_id: str | None
    credential_name: str | None
    show_segments: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class SimpleArgs:
    """Command line arguments for the ``simple`` subcommand."""

    command: Literal["simple"]
    segments: list[str]
    show_segments: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ConfigureArgs:
    """Command line arguments for the ``configure`` subcommand."""

    command: Literal["configure"]
    service_broker_name: str | None
    service_offering_name: str | None
    log_file: Path | None
    verbose: bool
    quiet: bool


CLIArgs = ServiceInstanceArgs | SimpleArgs | ConfigureArgs

__all__ = ["CLIArgs", "ConfigureArgs", "ServiceInstanceArgs", "SimpleArgs"]
