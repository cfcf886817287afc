"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ShowArgs:
    """Command line arguments for the ``show`` subcommand."""

    command: Literal["show"]
    music_path: Path
    as_json: bool
    artwork_out: Path | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ScanArgs:
    """Command line arguments for the ``scan`` subcommand."""

    command: Literal["scan"]
    directory: Path
    as_json: bool
    verbose: bool
    quiet: bool


CLIArgs = ShowArgs | ScanArgs

__all__ = ["CLIArgs", "ScanArgs", "ShowArgs"]
