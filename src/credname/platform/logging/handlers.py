"""Rich console handler for credential naming events.

Where: platform/logging/handlers.py
What: Render structured ``naming.*`` log records with styled name segments.
Why: Keep presentation concerns out of the naming domain.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class SegmentRichHandler(RichHandler):
    """Custom Rich handler that shows credential names segment by segment."""

    _NAMING_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "naming.build.success": ("🔑", "green"),
        "naming.build.incomplete": ("⚠️", "yellow"),
        "naming.render": ("📄", "blue"),
    }
    _SEPARATOR: ClassVar[str] = "/"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @classmethod
    def format_name(cls, name: str) -> Text:
        """Style a canonical name: separators in magenta, segments in white."""

        text = Text()
        for char in name:
            if char == cls._SEPARATOR:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_naming_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured naming events with dedicated styling."""

        event = getattr(record, "naming_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._NAMING_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        if event == "naming.build.incomplete":
            _ = body.append("Incomplete credential name")
            missing = getattr(record, "missing_fields", None)
            if isinstance(missing, Sequence) and not isinstance(missing, str) and missing:
                _ = body.append(" (missing: " + ", ".join(str(m) for m in missing) + ")")
        else:
            _ = body.append("Rendered " if event == "naming.render" else "Built ")
            name = getattr(record, "credential_name", None)
            if name:
                _ = body.append_text(self.format_name(str(name)))
            else:
                _ = body.append(record.getMessage())

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for naming events."""

        naming_text = self._render_naming_message(record)
        if naming_text is not None:
            return naming_text

        return super().render_message(record, message)


__all__ = ["SegmentRichHandler"]
