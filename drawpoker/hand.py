"""
The player's five-card hand.
"""

from typing import Iterable, Iterator, List, Tuple

from drawpoker.deck import Card

HAND_SIZE = 5


class Hand:
    """An ordered, fixed-size hand of cards.

    Cards are swapped in place by `replace`; the hand never grows or shrinks.
    """

    def __init__(self, cards: Iterable[Card]):
        self._cards: List[Card] = list(cards)
        if len(self._cards) != HAND_SIZE:
            raise ValueError(f"A hand holds exactly {HAND_SIZE} cards, got {len(self._cards)}")

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Snapshot of the cards in current order."""
        return tuple(self._cards)

    def sort(self) -> None:
        """Sort into display order (rank, then suit)."""
        self._cards.sort()

    def replace(self, index: int, card: Card) -> Card:
        """Put card at index and return the card it replaced."""
        if not 0 <= index < len(self._cards):
            raise IndexError(f"Hand index {index} out of range")
        old = self._cards[index]
        self._cards[index] = card
        return old

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._cards == other._cards

    def __repr__(self) -> str:
        return f"Hand([{', '.join(str(c) for c in self._cards)}])"
