"""
drawpoker: a round of five-card draw poker on the terminal.
"""

from drawpoker.deck import Card, Deck, Rank, Suit
from drawpoker.errors import DeckExhaustedError, DrawPokerError, InvalidValueError
from drawpoker.hand import Hand
from drawpoker.hand_evaluation import classify_hand

__all__ = [
    'Card', 'Deck', 'Rank', 'Suit', 'Hand', 'classify_hand',
    'DrawPokerError', 'DeckExhaustedError', 'InvalidValueError',
]
