"""Rich console handler for extraction logs.

Where: platform/logging/handlers.py
What: Render structured extraction events with icons and compact file paths.
Why: Keep console formatting out of the logger bootstrap module.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class TrackRichHandler(RichHandler):
    """Rich handler that renders extraction events and shortens file paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "extraction.start": ("🎧", "blue"),
        "extraction.success": ("✅", "green"),
        "extraction.no_metadata": ("ℹ️", "yellow"),
        "extraction.decode_failure": ("⚠️", "red"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "extraction.start": "Reading ",
        "extraction.success": "Read ",
        "extraction.no_metadata": "No metadata in ",
        "extraction.decode_failure": "Undecodable frame in ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

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
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path keeping only its trailing segments.

        Args:
            path: Absolute or relative path string to format.

        Returns:
            Text: Path with colored separators and an ellipsis when truncated.
        """
        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display_string = "…" + separator + separator.join(body_parts)
        else:
            display_string = str(pure_path) if body_parts else "."

        text = Text()
        for char in display_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_extraction_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured extraction events with dedicated styling."""

        event = getattr(record, "extraction_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        prefix = self._EVENT_PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path)))

        details: list[str] = []
        if event == "extraction.success":
            artist = getattr(record, "artist", None)
            title = getattr(record, "title", None)
            label = " - ".join(part for part in [artist, title] if part)
            if label:
                details.append(label)
            art_size = getattr(record, "art_size", None)
            if isinstance(art_size, int) and art_size > 0:
                details.append(f"artwork {art_size} B")
        elif event == "extraction.no_metadata":
            reason = getattr(record, "reason", None)
            if reason:
                details.append(str(reason))
        elif event == "extraction.decode_failure":
            frame_id = getattr(record, "frame_id", None)
            if frame_id:
                details.append(str(frame_id))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for extraction events."""

        extraction_text = self._render_extraction_message(record)
        if extraction_text is not None:
            return extraction_text

        return super().render_message(record, message)


__all__ = ["TrackRichHandler"]
