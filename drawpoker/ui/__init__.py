"""
UI module for drawpoker.
Provides terminal rendering helpers for hands and cards.
"""

from .colors import Colors
from .cards import card_art, card_label, cards_horizontal, format_hand, SUIT_COLORS

__all__ = ['Colors', 'card_art', 'card_label', 'cards_horizontal', 'format_hand', 'SUIT_COLORS']
