"""Display management for CLI interface."""

from trackmeta.ui.cli.display.record import RecordDisplay

__all__ = ["RecordDisplay"]
