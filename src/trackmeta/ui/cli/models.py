"""src/trackmeta/ui/cli/models.py
What: Shared UI-facing data structures for CLI presentation layers.
Why: Provide lightweight value objects without introducing import cycles.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from trackmeta.shared.track_record import TrackRecord


@dataclass(slots=True, frozen=True)
class ScanEntry:
    """One file visited by a scan and the record read from it, if any."""

    path: Path
    record: TrackRecord | None


__all__ = ["ScanEntry"]
