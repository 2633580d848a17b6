"""Display helpers for the CLI."""

from credname.ui.cli.display.segments import build_segments_table

__all__ = ["build_segments_table"]
