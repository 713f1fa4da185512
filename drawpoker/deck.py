"""
Deck and card operations for drawpoker.

Cards are small immutable tuples of (Rank, Suit). The Deck owns the shrinking
list of cards left to deal; a card taken from it is never put back.
"""

import logging
import random
import re
from enum import IntEnum
from typing import Iterator, List, NamedTuple, Optional

from drawpoker.errors import DeckExhaustedError, InvalidValueError


class Suit(IntEnum):
    SPADE = 0
    HEART = 1
    DIAMOND = 2
    CLUB = 3

    @classmethod
    def from_raw(cls, value: int) -> "Suit":
        """Checked conversion from a raw 0..3 value."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidValueError(f"Cannot convert {value!r} to Suit") from None

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]

    def __str__(self) -> str:
        return self.symbol


class Rank(IntEnum):
    """Card ranks. Ace is always low."""
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @classmethod
    def from_raw(cls, value: int) -> "Rank":
        """Checked conversion from a raw 1..13 value."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidValueError(f"Cannot convert {value!r} to Rank") from None

    @property
    def label(self) -> str:
        names = {1: 'A', 11: 'J', 12: 'Q', 13: 'K'}
        return names.get(self.value, str(self.value))

    def __str__(self) -> str:
        return self.label


SUIT_SYMBOLS = {
    Suit.SPADE: '♠',
    Suit.HEART: '♥',
    Suit.DIAMOND: '♦',
    Suit.CLUB: '♣',
}

# Letters accepted by parse_card in addition to the symbols above
SUIT_LETTERS = {'S': Suit.SPADE, 'H': Suit.HEART, 'D': Suit.DIAMOND, 'C': Suit.CLUB}
RANK_LETTERS = {'A': Rank.ACE, 'T': Rank.TEN, 'J': Rank.JACK, 'Q': Rank.QUEEN, 'K': Rank.KING}


class Card(NamedTuple):
    """A playing card. Tuple ordering gives (rank, suit) display order."""
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return self.rank.label + self.suit.symbol


def parse_card(text: str) -> Card:
    """Parse strings like 'A♠', '10d', 'KH' or 'Tc' into a Card."""
    s = text.strip().upper()
    if len(s) < 2:
        raise InvalidValueError(f"Invalid card string: {text!r}")

    rank_part, suit_part = s[:-1], s[-1]

    suit = SUIT_LETTERS.get(suit_part)
    if suit is None:
        for candidate, symbol in SUIT_SYMBOLS.items():
            if symbol == suit_part:
                suit = candidate
                break
        else:
            raise InvalidValueError(f"Invalid suit in card string: {text!r}")

    if rank_part in RANK_LETTERS:
        rank = RANK_LETTERS[rank_part]
    elif re.fullmatch(r'[0-9]{1,2}', rank_part):
        rank = Rank.from_raw(int(rank_part))
    else:
        raise InvalidValueError(f"Invalid rank in card string: {text!r}")

    return Card(rank, suit)


def make_deck() -> List[Card]:
    """Create a standard 52-card deck: every rank of spades, then hearts, diamonds, clubs."""
    return [Card(Rank.from_raw(r), Suit.from_raw(s)) for s in range(4) for r in range(1, 14)]


class Deck:
    """The 52-card universe for one round.

    Cards leave from the front when dealt and from the back when drawn as a
    replacement. Either way the deck only ever shrinks.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        # random.Random() seeds itself from system entropy
        self._rng = rng if rng is not None else random.Random()
        self._cards: List[Card] = make_deck()

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place."""
        self._rng.shuffle(self._cards)
        logging.debug(f"Shuffled deck of {len(self._cards)} cards")

    def deal(self, num_cards: int) -> List[Card]:
        """Remove and return the first num_cards cards."""
        if num_cards < 0:
            raise ValueError(f"Cannot deal a negative number of cards ({num_cards})")
        if len(self._cards) < num_cards:
            raise DeckExhaustedError(f"Cannot deal {num_cards} cards from deck of {len(self._cards)}")

        dealt = self._cards[:num_cards]
        del self._cards[:num_cards]
        return dealt

    def draw_one(self) -> Card:
        """Remove and return the last card."""
        if not self._cards:
            raise DeckExhaustedError("Cannot draw from an empty deck")
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"


def create_shuffled_deck(rng: Optional[random.Random] = None) -> Deck:
    """Create and return a shuffled deck."""
    deck = Deck(rng)
    deck.shuffle()
    return deck
