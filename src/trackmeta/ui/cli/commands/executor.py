"""src/trackmeta/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse the extractor and presentation helpers across commands.
"""

from abc import ABC, abstractmethod
from typing import Any

from rich.console import Console

from trackmeta.features.metadata import MetadataExtractor
from trackmeta.ui.cli.display.record import RecordDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    extractor: type[MetadataExtractor]
    record_display: RecordDisplay

    def __init__(
        self,
        *,
        extractor: type[MetadataExtractor] = MetadataExtractor,
        console: Console | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            extractor: Extractor facade used to read records.
            console: Console to render on; defaults to stdout.
        """
        self.extractor = extractor
        self.record_display = RecordDisplay(console)

    @abstractmethod
    def execute(self) -> Any:
        """Execute the command."""
        pass
