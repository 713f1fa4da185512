import random
from typing import Callable, List

import pytest

from drawpoker.deck import Card, parse_card
from drawpoker.hand import Hand


class NoShuffle(random.Random):
    """Random whose shuffle leaves the deck in its fresh order."""

    def shuffle(self, x, *args, **kwargs):
        return None


@pytest.fixture
def rng() -> random.Random:
    """Seeded random number generator for reproducible deals."""
    return random.Random(42)


@pytest.fixture
def unshuffled_rng() -> random.Random:
    return NoShuffle()


@pytest.fixture
def make_cards() -> Callable[[str], List[Card]]:
    """Factory turning 'A♠ A♥ 2♦' into a list of cards."""

    def _factory(hand_text: str) -> List[Card]:
        return [parse_card(part) for part in hand_text.split()]

    return _factory


@pytest.fixture
def make_hand(make_cards) -> Callable[[str], Hand]:
    def _factory(hand_text: str) -> Hand:
        return Hand(make_cards(hand_text))

    return _factory


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep DRAWPOKER_* variables from the developer's shell out of tests."""
    for name in ('DRAWPOKER_SEED', 'DRAWPOKER_COLOR', 'DRAWPOKER_ART',
                 'DRAWPOKER_FULL_HOUSE_RULE', 'DRAWPOKER_LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
