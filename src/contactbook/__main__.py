"""Run: python -m contactbook <command>."""

import sys

from contactbook.cli import main

if __name__ == "__main__":
    sys.exit(main())
