"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from trackmeta.config.config import Config
from trackmeta.config.settings import CONSOLE_LOG_LEVEL
from trackmeta.platform.logging import logger, setup_logger
from trackmeta.ui.cli.args.options import CLIArgs, ScanArgs, ShowArgs


@final
class ArgumentParser:
    """Builds the ``trackmeta`` parser and turns its namespace into typed args."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create the parser with its ``show`` and ``scan`` subcommands."""
        parser = argparse.ArgumentParser(
            prog="trackmeta",
            description="Read ID3 metadata and embedded artwork from AIFF and MP3 files.",
        )
        subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

        show = subparsers.add_parser("show", help="Print the record read from one file")
        _ = show.add_argument("music_path", metavar="MUSIC_PATH", help="AIFF or MP3 file")
        _ = show.add_argument(
            "--artwork-out",
            metavar="FILE",
            help="Also write the embedded picture bytes to FILE",
        )

        scan = subparsers.add_parser("scan", help="Read every AIFF and MP3 file below a directory")
        _ = scan.add_argument("directory", metavar="DIRECTORY", help="Directory to walk recursively")

        for subparser in (show, scan):
            _ = subparser.add_argument(
                "--json",
                action="store_true",
                dest="as_json",
                help="Print JSON instead of a table",
            )
            verbosity = subparser.add_mutually_exclusive_group()
            _ = verbosity.add_argument("--verbose", action="store_true", help="Log every extraction step")
            _ = verbosity.add_argument("--quiet", action="store_true", help="Only log errors")

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Parse arguments, configure logging, and return typed arguments.

        Args:
            args_list: Arguments to parse instead of ``sys.argv`` (for testing).

        Raises:
            SystemExit: On usage errors, or when the scan directory is missing.
        """
        parsed = ArgumentParser.create_parser().parse_args(args_list)

        _ = setup_logger(
            log_file=Config.load().log_file,
            console_level=ArgumentParser._console_level(parsed),
        )

        if parsed.command == "show":
            return ShowArgs(
                command="show",
                music_path=Path(parsed.music_path),
                as_json=parsed.as_json,
                artwork_out=Path(parsed.artwork_out) if parsed.artwork_out else None,
                verbose=parsed.verbose,
                quiet=parsed.quiet,
            )

        directory = Path(parsed.directory)
        if not directory.is_dir():
            logger.error("Directory does not exist: %s", directory)
            sys.exit(1)

        return ScanArgs(
            command="scan",
            directory=directory,
            as_json=parsed.as_json,
            verbose=parsed.verbose,
            quiet=parsed.quiet,
        )

    @staticmethod
    def _console_level(parsed: argparse.Namespace) -> int:
        if parsed.quiet:
            return logging.ERROR
        if parsed.verbose:
            return logging.DEBUG
        return CONSOLE_LOG_LEVEL
