"""
Card rendering for the drawpoker terminal UI.

`format_hand` produces the plain indexed listing; the art helpers draw
small boxed cards that can be laid out side by side.
"""

from typing import Iterable, List

from drawpoker.deck import Card, Suit
from .colors import Colors


# Card suit colors
SUIT_COLORS = {
    Suit.HEART: Colors.RED,
    Suit.DIAMOND: Colors.RED,
    Suit.CLUB: Colors.BLACK,
    Suit.SPADE: Colors.BLACK,
}


def card_label(card: Card, color: bool = False) -> str:
    """Short form of a card, e.g. '10♦', optionally with a colored suit."""
    if not color:
        return str(card)
    return f"{card.rank.label}{SUIT_COLORS[card.suit]}{card.suit.symbol}{Colors.RESET}"


def format_hand(cards: Iterable[Card], color: bool = False) -> str:
    """One '<index>: <card>' line per card."""
    return "\n".join(f"{i}: {card_label(card, color)}" for i, card in enumerate(cards))


def card_art(card: Card, color: bool = False) -> List[str]:
    """Format a single card as ASCII art lines."""
    rank = card.rank.label
    symbol = card.suit.symbol

    # Ten is the only two-character rank
    rank_left = f"{rank:<2}"
    rank_right = f"{rank:>2}"

    lines = [
        "╭───╮",
        f"│{rank_left}{symbol}│",
        "│   │",
        f"│{symbol}{rank_right}│",
        "╰───╯",
    ]
    if color:
        suit_color = SUIT_COLORS[card.suit]
        lines = [f"{Colors.BOLD}{Colors.BG_WHITE}{suit_color}{line}{Colors.RESET}" for line in lines]
    return lines


def cards_horizontal(cards: Iterable[Card], color: bool = False) -> str:
    """Render multiple cards side-by-side horizontally."""
    card_lines = [card_art(card, color) for card in cards]
    if not card_lines:
        return ""

    result_lines = []
    for line_idx in range(len(card_lines[0])):
        result_lines.append(" ".join(lines[line_idx] for lines in card_lines))
    return "\n".join(result_lines)
