"""Command execution package for CLI."""

from trackmeta.ui.cli.commands.executor import CommandExecutor
from trackmeta.ui.cli.commands.scan import ScanCommand
from trackmeta.ui.cli.commands.show import ShowCommand

__all__ = [
    "CommandExecutor",
    "ScanCommand",
    "ShowCommand",
]
