"""Command line interface for trackmeta."""

import sys
from typing import final

from trackmeta.platform.logging import logger
from trackmeta.ui.cli.args import ArgumentParser
from trackmeta.ui.cli.args.options import CLIArgs, ShowArgs
from trackmeta.ui.cli.commands import ScanCommand, ShowCommand

EXIT_FAILURE = 1
# argparse already owns 2 for usage errors.
EXIT_NO_METADATA = 3
EXIT_INTERRUPTED = 130


@final
class CommandProcessor:
    """Dispatches parsed arguments to the matching command."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Run one CLI invocation.

        ``show`` exits with status 3 when the file yields no metadata, so scripts
        can tell it from a crash (status 1); ``scan`` always succeeds once the
        directory exists.

        Args:
            args_list: Arguments to use instead of ``sys.argv`` (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            if isinstance(args, ShowArgs):
                if ShowCommand(args).execute() is None:
                    sys.exit(EXIT_NO_METADATA)
            else:
                _ = ScanCommand(args).execute()
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(EXIT_INTERRUPTED)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", e)
            sys.exit(EXIT_FAILURE)


def main() -> int:
    """Console script entry point.

    Returns:
        int: 0 on success; failures leave through ``sys.exit``.
    """
    CommandProcessor.process_command()
    return 0
