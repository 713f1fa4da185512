"""
Exceptions raised by drawpoker.

Both are invariant violations: a well-formed round never raises them.
"""


class DrawPokerError(Exception):
    """Base class for drawpoker errors."""


class InvalidValueError(DrawPokerError, ValueError):
    """A raw suit/rank value or card string that does not name a card."""


class DeckExhaustedError(DrawPokerError, ValueError):
    """More cards were requested than the deck still holds."""
