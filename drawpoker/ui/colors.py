"""
ANSI color codes for drawpoker terminal output.
"""


class Colors:
    """ANSI color codes for terminal formatting."""
    RED = '\033[31m'
    BLACK = '\033[30m'
    BOLD = '\033[1m'
    RESET = '\033[0m'
    BG_WHITE = '\033[47m'
