"""
Entry point for drawpoker.
Plays one round of five-card draw on the terminal.
"""

import sys

from drawpoker.cli import main


if __name__ == "__main__":
    sys.exit(main())
