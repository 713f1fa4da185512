"""
A single round of five-card draw.

This is the coordination module that brings together the deck, the hand,
the discard loop and the hand classifier.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional, Sequence, Tuple

from drawpoker.deck import Deck
from drawpoker.discard import DiscardLoop
from drawpoker.hand import HAND_SIZE, Hand
from drawpoker.hand_evaluation import CLASSIFIERS, Predicate, classify_hand


class DrawGame:
    """One round: shuffle, deal, discard, classify."""

    def __init__(self, rng: Optional[random.Random] = None,
                 classifiers: Sequence[Tuple[Predicate, str]] = CLASSIFIERS):
        self.deck = Deck(rng)
        self.classifiers = classifiers
        self.hand: Optional[Hand] = None
        self.discard_loop: Optional[DiscardLoop] = None

    def deal(self) -> Hand:
        """Shuffle the deck and deal a sorted hand."""
        if self.hand is not None:
            raise RuntimeError("Hand has already been dealt")
        self.deck.shuffle()
        self.hand = Hand(self.deck.deal(HAND_SIZE))
        self.hand.sort()
        self.discard_loop = DiscardLoop(self.hand, self.deck)
        logging.info(f"Dealt {', '.join(str(c) for c in self.hand)}")
        return self.hand

    def discard(self, lines: Iterable[str]) -> Hand:
        """Run the discard loop over lines of player input."""
        if self.discard_loop is None:
            raise RuntimeError("Deal a hand before discarding")
        return self.discard_loop.run(lines)

    def classify(self) -> str:
        if self.discard_loop is None or not self.discard_loop.finished:
            raise RuntimeError("Hand can only be classified after the discard phase")
        label = classify_hand(self.hand, self.classifiers)
        logging.info(f"Final hand {', '.join(str(c) for c in self.hand)} classified as {label}")
        return label
