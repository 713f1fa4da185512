"""
Discard and redraw loop.

The player names one hand index per line. A valid index swaps that card for
a fresh one from the deck; anything else ends the loop and the hand is
sorted one last time.
"""

import logging
import re
from enum import Enum
from typing import Iterable, Optional

from drawpoker.deck import Deck
from drawpoker.hand import Hand

_UNSIGNED = re.compile(r'\+?[0-9]+')


class Phase(Enum):
    EDITING = 'editing'
    FINAL = 'final'


def parse_index(line: str) -> Optional[int]:
    """Parse a line as an unsigned integer, or None if it is not one."""
    text = line.strip()
    if not _UNSIGNED.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # Past the interpreter's int string limit
        return None


class DiscardLoop:
    """State machine for the discard phase of a round."""

    def __init__(self, hand: Hand, deck: Deck):
        self.hand = hand
        self.deck = deck
        self.phase = Phase.EDITING
        self.discards = 0

    @property
    def finished(self) -> bool:
        return self.phase is Phase.FINAL

    def submit(self, line: str) -> bool:
        """Handle one line of input.

        Returns True if a card was replaced and the loop is still editing,
        False if the line ended the loop.
        """
        if self.finished:
            raise RuntimeError("Discard loop has already finished")

        index = parse_index(line)
        if index is None or index >= len(self.hand):
            logging.debug(f"Discard loop stopped on input {line.strip()!r}")
            self.finish()
            return False

        new_card = self.deck.draw_one()
        old_card = self.hand.replace(index, new_card)
        self.discards += 1
        logging.debug(f"Discarded {old_card} at {index}, drew {new_card} ({len(self.deck)} left in deck)")
        return True

    def finish(self) -> None:
        """Move to the final phase. The hand is re-sorted once."""
        if self.finished:
            return
        self.hand.sort()
        self.phase = Phase.FINAL
        logging.info(f"Discard phase finished after {self.discards} discard(s)")

    def run(self, lines: Iterable[str]) -> Hand:
        """Feed lines until one ends the loop. Running out of lines also ends it."""
        for line in lines:
            if not self.submit(line):
                break
        self.finish()
        return self.hand
