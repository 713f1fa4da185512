"""
Command line entry point for drawpoker.
"""

import argparse
import logging
import random
import sys
from typing import Iterable, List, Optional, TextIO

from drawpoker.errors import DrawPokerError
from drawpoker.game import DrawGame
from drawpoker.hand_evaluation import FULL_HOUSE_RULES
from drawpoker.settings import get_settings
from drawpoker.terminal_ui import TerminalUI
from drawpoker.version import get_version_info


def build_parser() -> argparse.ArgumentParser:
    version_info = get_version_info()
    parser = argparse.ArgumentParser(prog="drawpoker", description="Play a round of five-card draw")
    parser.add_argument("--seed", type=int, default=None, help="Seed the shuffle for a reproducible deal")
    parser.add_argument("--color", action="store_true", help="Color suit symbols")
    parser.add_argument("--art", action="store_true", help="Also draw the hand as ASCII-art cards")
    parser.add_argument("--standard-full-house", action="store_true",
                        help="Only count three of a kind plus a pair as a full house")
    parser.add_argument("--env-file", default=".env", help="Settings file to read")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {version_info['version']} ({version_info['build_date']})")
    return parser


def main(argv: Optional[List[str]] = None, stdin: Optional[Iterable[str]] = None,
         stdout: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = get_settings(args.env_file)
    except ValueError as e:
        parser.error(str(e))

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=settings.log_level)

    seed = args.seed if args.seed is not None else settings.seed
    rule = 'standard' if args.standard_full_house else settings.full_house_rule
    if seed is not None:
        logging.info(f"Using shuffle seed {seed}")

    game = DrawGame(rng=random.Random(seed), classifiers=FULL_HOUSE_RULES[rule])
    ui = TerminalUI(
        stdout if stdout is not None else sys.stdout,
        color=args.color or settings.color,
        art=args.art or settings.art,
    )

    try:
        ui.play(game, stdin if stdin is not None else sys.stdin)
    except DrawPokerError as e:
        logging.error(f"Round aborted: {e}")
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n👋 Bye!", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
