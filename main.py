"""Main entry point for the task review tool."""

import sys

from taskreview.cli import main


if __name__ == "__main__":
    sys.exit(main())
