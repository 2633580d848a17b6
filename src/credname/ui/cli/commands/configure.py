"""Persist CLI defaults to the config file."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import final

from rich.console import Console

from credname.config.config import Config
from credname.ui.cli.args.options import ConfigureArgs


@final
class ConfigureCommand:
    """Merge the given values into the loaded configuration and save it."""

    def __init__(self, args: ConfigureArgs, *, console: Console | None = None) -> None:
        self._args = args
        self._console = console or Console()

    def execute(self) -> Path:
        current = Config.load()
        args = self._args
        updated = replace(
            current,
            service_broker_name=(
                current.service_broker_name
                if args.service_broker_name is None
                else args.service_broker_name
            ),
            service_offering_name=(
                current.service_offering_name
                if args.service_offering_name is None
                else args.service_offering_name
            ),
            log_file=current.log_file if args.log_file is None else args.log_file,
        )
        target = updated.save()
        Config.reset()
        self._console.print(str(target), markup=False, highlight=False, soft_wrap=True)
        return target

