"""Command line argument handling package."""

from trackmeta.ui.cli.args.parser import ArgumentParser
from trackmeta.ui.cli.args.options import CLIArgs, ScanArgs, ShowArgs

__all__ = ["ArgumentParser", "CLIArgs", "ScanArgs", "ShowArgs"]
