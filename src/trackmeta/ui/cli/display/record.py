"""src/trackmeta/ui/cli/display/record.py
What: Render track records and scan summaries for the CLI.
Why: Keep console output formatting consistent across commands.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any, final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from trackmeta.shared.track_record import TEXT_FIELDS, TrackRecord
from trackmeta.ui.cli.models import ScanEntry

_ABSENT = Text("-", style="dim")


@final
class RecordDisplay:
    """Handles record display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize record display."""
        self.console = console or Console()

    def show_record(self, path: Path, record: TrackRecord) -> None:
        """Display every field of one record as a two-column table."""

        table = Table(title=str(path), box=box.SIMPLE_HEAVY, show_header=False)
        table.add_column("Field", style="cyan", no_wrap=True)
        table.add_column("Value")

        for name in TEXT_FIELDS:
            value = getattr(record, name)
            table.add_row(name, _ABSENT if value is None else Text(value))

        if record.has_artwork:
            table.add_row("artwork", Text(f"{record.art_size} bytes (md5 {record.artwork_hash})"))
        else:
            table.add_row("artwork", _ABSENT)

        self.console.print(table)

    def show_no_metadata(self, path: Path) -> None:
        """Report that a file produced no record."""

        self.console.print(f"[yellow]No metadata available for[/yellow] {path}")

    def show_scan(self, directory: Path, entries: Sequence[ScanEntry], *, quiet: bool = False) -> None:
        """Display one row per scanned file followed by totals."""

        if quiet:
            return

        table = Table(title=f"Scan of {directory}", box=box.SIMPLE_HEAVY)
        table.add_column("File", style="white")
        table.add_column("Artist")
        table.add_column("Title")
        table.add_column("Artwork", justify="right")

        for entry in entries:
            try:
                display_path = str(entry.path.relative_to(directory))
            except ValueError:
                display_path = str(entry.path)

            record = entry.record
            if record is None:
                table.add_row(display_path, _ABSENT, _ABSENT, Text("no metadata", style="yellow"))
                continue

            table.add_row(
                display_path,
                _ABSENT if record.artist is None else Text(record.artist),
                _ABSENT if record.title is None else Text(record.title),
                str(record.art_size) if record.has_artwork else _ABSENT,
            )

        self.console.print(table)

        read = sum(1 for entry in entries if entry.record is not None)
        self.console.print(f"Total files scanned: {len(entries)}")
        self.console.print(f"[green]With metadata: {read}[/green]")
        if read != len(entries):
            self.console.print(f"[yellow]Without metadata: {len(entries) - read}[/yellow]")

    def show_json(self, data: Any) -> None:
        """Print ``data`` as indented JSON."""

        self.console.print_json(json.dumps(data, ensure_ascii=False))


__all__ = ["RecordDisplay"]
