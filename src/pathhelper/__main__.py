"""Module entry point for ``python -m pathhelper``."""

import sys

from pathhelper.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
