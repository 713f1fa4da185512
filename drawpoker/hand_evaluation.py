"""
Hand classification for drawpoker.

This is not full poker ranking. A hand is tested against an ordered list of
(predicate, label) pairs and the first predicate that holds names the hand.
"""

from collections import Counter
from typing import Callable, Iterable, List, Sequence, Tuple

from drawpoker.deck import Card
from drawpoker.hand import HAND_SIZE

FLUSH = 'Flush!'
FULL_HOUSE = 'Full House!'
TWO_PAIR = 'Two Pair!'
NO_MATCH = 'Nope...'

Predicate = Callable[[Sequence[Card]], bool]


def is_flush(cards: Sequence[Card]) -> bool:
    """All cards share one suit."""
    return len({suit for _, suit in cards}) == 1


def is_full_house(cards: Sequence[Card]) -> bool:
    """Exactly two distinct ranks among the cards.

    This is the classic rule of this game, not the poker one: four of a kind
    plus a kicker also counts. See is_standard_full_house for the 3+2 split.
    """
    return len({rank for rank, _ in cards}) == 2


def is_two_pair(cards: Sequence[Card]) -> bool:
    """Exactly two ranks appear exactly twice."""
    counts = Counter(rank for rank, _ in cards)
    return sum(1 for count in counts.values() if count == 2) == 2


def is_standard_full_house(cards: Sequence[Card]) -> bool:
    """Three of one rank and two of another."""
    counts = sorted(Counter(rank for rank, _ in cards).values(), reverse=True)
    return counts == [3, 2]


# Order matters: the predicates overlap and the first match wins.
CLASSIFIERS: List[Tuple[Predicate, str]] = [
    (is_flush, FLUSH),
    (is_full_house, FULL_HOUSE),
    (is_two_pair, TWO_PAIR),
]

STANDARD_CLASSIFIERS: List[Tuple[Predicate, str]] = [
    (is_flush, FLUSH),
    (is_standard_full_house, FULL_HOUSE),
    (is_two_pair, TWO_PAIR),
]

FULL_HOUSE_RULES = {
    'classic': CLASSIFIERS,
    'standard': STANDARD_CLASSIFIERS,
}


def classify_hand(cards: Iterable[Card], classifiers: Sequence[Tuple[Predicate, str]] = CLASSIFIERS) -> str:
    """Return the label of the first classifier matching a five-card hand."""
    cards = list(cards)
    if len(cards) != HAND_SIZE:
        raise ValueError(f"Can only classify {HAND_SIZE}-card hands, got {len(cards)}")

    for predicate, label in classifiers:
        if predicate(cards):
            return label
    return NO_MATCH
