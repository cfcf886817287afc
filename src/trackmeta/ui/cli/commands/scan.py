"""src/trackmeta/ui/cli/commands/scan.py
What: Read metadata for every supported file below a directory.
Why: Give a collection-wide view of which tracks carry usable tags.
"""

from pathlib import Path
from typing import override

from rich.console import Console

from trackmeta.features.metadata import MetadataExtractor
from trackmeta.platform.logging import logger
from trackmeta.ui.cli.args.options import ScanArgs
from trackmeta.ui.cli.commands.executor import CommandExecutor
from trackmeta.ui.cli.models import ScanEntry


class ScanCommand(CommandExecutor):
    """Command for reading every supported file in a directory tree."""

    args: ScanArgs

    def __init__(
        self,
        args: ScanArgs,
        *,
        extractor: type[MetadataExtractor] = MetadataExtractor,
        console: Console | None = None,
    ) -> None:
        super().__init__(extractor=extractor, console=console)
        self.args = args

    def collect_files(self) -> list[Path]:
        """Return supported files below the directory in a stable order."""

        return sorted(
            path
            for path in self.args.directory.rglob("*")
            if path.is_file() and self.extractor.is_supported(path)
        )

    @override
    def execute(self) -> list[ScanEntry]:
        """Extract every supported file and display the summary.

        Returns:
            One entry per supported file, with None records for files
            that carry no metadata.
        """
        files = self.collect_files()
        logger.info("Found %d supported files in %s", len(files), self.args.directory)

        entries = [ScanEntry(path=path, record=self.extractor.extract(path)) for path in files]

        if self.args.as_json:
            self.record_display.show_json(
                [
                    {
                        "path": str(entry.path),
                        "metadata": entry.record.to_dict() if entry.record is not None else None,
                    }
                    for entry in entries
                ]
            )
        else:
            self.record_display.show_scan(self.args.directory, entries, quiet=self.args.quiet)
        return entries
