"""src/trackmeta/ui/cli/commands/show.py
What: Print the metadata record of a single file via the CLI.
Why: Let users inspect what the extractor reads from one track.
"""

from pathlib import Path
from typing import override

from rich.console import Console

from trackmeta.features.metadata import MetadataExtractor, TrackRecord
from trackmeta.platform.logging import logger
from trackmeta.ui.cli.args.options import ShowArgs
from trackmeta.ui.cli.commands.executor import CommandExecutor


class ShowCommand(CommandExecutor):
    """Command for reading a single file."""

    args: ShowArgs

    def __init__(
        self,
        args: ShowArgs,
        *,
        extractor: type[MetadataExtractor] = MetadataExtractor,
        console: Console | None = None,
    ) -> None:
        super().__init__(extractor=extractor, console=console)
        self.args = args

    @override
    def execute(self) -> TrackRecord | None:
        """Extract and display the record.

        Returns:
            The record, or None when the file has no metadata.
        """
        record = self.extractor.extract(self.args.music_path)

        if record is None:
            if self.args.as_json:
                self.record_display.show_json(None)
            elif not self.args.quiet:
                self.record_display.show_no_metadata(self.args.music_path)
            return None

        if self.args.artwork_out is not None:
            self._write_artwork(record, self.args.artwork_out)

        if self.args.as_json:
            self.record_display.show_json(record.to_dict())
        elif not self.args.quiet:
            self.record_display.show_record(self.args.music_path, record)
        return record

    def _write_artwork(self, record: TrackRecord, target: Path) -> None:
        if record.artwork is None:
            logger.warning("No embedded artwork in %s; nothing written", self.args.music_path)
            return

        target.parent.mkdir(parents=True, exist_ok=True)
        _ = target.write_bytes(record.artwork)
        logger.info("Wrote %d bytes of artwork to %s", record.art_size, target)
