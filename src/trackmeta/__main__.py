"""Allow ``python -m trackmeta``."""

import sys

from trackmeta.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
