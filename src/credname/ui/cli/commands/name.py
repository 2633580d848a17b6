"""src/credname/ui/cli/commands/name.py
What: Build credential names from parsed CLI arguments and print them.
Why: Keep argument parsing apart from name construction and rendering.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from credname.features.naming import (
    CredentialName,
    ServiceInstanceCredentialName,
    SimpleCredentialName,
)
from credname.platform.logging import logger
from credname.ui.cli.args.options import ServiceInstanceArgs, SimpleArgs
from credname.ui.cli.display import build_segments_table


class _NameCommand:
    """Shared rendering for name-building commands."""

    def __init__(self, *, show_segments: bool, console: Console | None = None) -> None:
        self._show_segments = show_segments
        self._console = console or Console()

    def _render(self, credential_name: CredentialName) -> CredentialName:
        logger.debug(
            "Rendering %s",
            credential_name.name,
            extra={"naming_event": "naming.render", "credential_name": credential_name.name},
        )
        if self._show_segments:
            self._console.print(build_segments_table(credential_name))
        else:
            # bare name only, stdout stays pipeable
            self._console.print(credential_name.name, markup=False, highlight=False, soft_wrap=True)
        return credential_name


@final
class ServiceInstanceCommand(_NameCommand):
    """Build and print a service instance credential name."""

    def __init__(self, args: ServiceInstanceArgs, *, console: Console | None = None) -> None:
        super().__init__(show_segments=args.show_segments, console=console)
        self._args = args

    def execute(self) -> CredentialName:
        """Build the name and print it.

        Raises:
            IncompleteCredentialNameError: If broker or offering could not be resolved.
        """
        builder = ServiceInstanceCredentialName.builder()
        if self._args.service_broker_name is not None:
            _ = builder.service_broker_name(self._args.service_broker_name)
        if self._args.service_offering_name is not None:
            _ = builder.service_offering_name(self._args.service_offering_name)
        if self._args.service_binding_id is not None:
            _ = builder.service_binding_id(self._args.service_binding_id)
        if self._args.credential_name is not None:
            _ = builder.credential_name(self._args.credential_name)
        return self._render(builder.build())


@final
class SimpleCommand(_NameCommand):
    """Build and print a simple credential name."""

    def __init__(self, args: SimpleArgs, *, console: Console | None = None) -> None:
        super().__init__(show_segments=args.show_segments, console=console)
        self._args = args

    def execute(self) -> CredentialName:
        """Build the name and print it."""
        return self._render(SimpleCredentialName(*self._args.segments))
