"""
Terminal front end for a round of drawpoker.

Keeps presentation out of the game: `TerminalUI.play` prints the round
transcript to any text stream and reads discards from any iterable of lines.
"""

from typing import Iterable, TextIO

from drawpoker.game import DrawGame
from drawpoker.hand import Hand
from drawpoker.ui.cards import cards_horizontal, format_hand

DISCARD_PROMPT = "Which cards would you like to discard? (0-4, other to stop)"


class TerminalUI:
    def __init__(self, out: TextIO, color: bool = False, art: bool = False):
        self.out = out
        self.color = color
        self.art = art

    def _print(self, text: str = "") -> None:
        self.out.write(text + "\n")

    def render_hand(self, title: str, hand: Hand) -> None:
        self._print(title)
        self._print(format_hand(hand, self.color))
        if self.art:
            self._print(cards_horizontal(hand, self.color))
        self._print()

    def play(self, game: DrawGame, lines: Iterable[str]) -> str:
        """Play one round and return the hand's label."""
        self.render_hand("Your hand:", game.deal())

        self._print(DISCARD_PROMPT)
        self.out.flush()
        hand = game.discard(lines)
        self._print()

        self.render_hand("Your new hand:", hand)

        label = game.classify()
        self._print(f"Your hand is: {label}")
        self.out.flush()
        return label
