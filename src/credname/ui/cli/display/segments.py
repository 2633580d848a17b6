"""Segment table rendering for credential names."""

from __future__ import annotations

from rich import box
from rich.table import Table
from rich.text import Text

from credname.features.naming import CredentialName


def build_segments_table(credential_name: CredentialName) -> Table:
    """Build a Rich table listing the ordered segments of ``credential_name``.

    Segments are wrapped in ``Text`` so brackets are shown, never parsed as markup.
    """

    table = Table(
        title=Text(credential_name.name),
        show_header=True,
        header_style="bold magenta",
        box=box.SIMPLE_HEAD,
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Segment", style="bold")
    for index, segment in enumerate(credential_name.segments):
        table.add_row(str(index), Text(segment))
    return table


__all__ = ["build_segments_table"]
