import random

import pytest

from drawpoker.deck import Card, Deck, Rank, Suit, create_shuffled_deck, make_deck, parse_card
from drawpoker.errors import DeckExhaustedError, InvalidValueError


def test_make_deck_has_52_unique_cards():
    deck = make_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert set(deck) == {Card(rank, suit) for rank in Rank for suit in Suit}


def test_fresh_deck_order_is_suit_by_suit():
    cards = list(Deck())
    assert cards[0] == Card(Rank.ACE, Suit.SPADE)
    assert cards[12] == Card(Rank.KING, Suit.SPADE)
    assert cards[13] == Card(Rank.ACE, Suit.HEART)
    assert cards[-1] == Card(Rank.KING, Suit.CLUB)
    assert all(card.suit == Suit.SPADE for card in cards[:13])


def test_shuffle_is_a_permutation(rng):
    deck = Deck(rng)
    before = sorted(deck)
    deck.shuffle()
    assert len(deck) == 52
    assert sorted(deck) == before


def test_same_seed_gives_same_order():
    first = create_shuffled_deck(random.Random(7))
    second = create_shuffled_deck(random.Random(7))
    assert list(first) == list(second)


def test_deal_removes_cards_from_the_front(rng):
    deck = create_shuffled_deck(rng)
    expected = list(deck)[:5]

    dealt = deck.deal(5)

    assert dealt == expected
    assert len(deck) == 47
    assert all(card not in deck for card in dealt)


def test_deal_zero_cards():
    deck = Deck()
    assert deck.deal(0) == []
    assert len(deck) == 52


def test_deal_more_than_remaining_raises():
    deck = Deck()
    deck.deal(50)
    with pytest.raises(DeckExhaustedError):
        deck.deal(3)
    # Nothing was removed by the failed deal
    assert len(deck) == 2


def test_deal_negative_raises():
    with pytest.raises(ValueError):
        Deck().deal(-1)


def test_draw_one_takes_the_last_card(rng):
    deck = create_shuffled_deck(rng)
    last = list(deck)[-1]
    assert deck.draw_one() == last
    assert last not in deck
    assert len(deck) == 51


def test_draw_from_empty_deck_raises():
    deck = Deck()
    deck.deal(52)
    with pytest.raises(DeckExhaustedError) as exc_info:
        deck.draw_one()
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.parametrize("raw, expected", [(0, Suit.SPADE), (1, Suit.HEART), (2, Suit.DIAMOND), (3, Suit.CLUB)])
def test_suit_from_raw(raw, expected):
    assert Suit.from_raw(raw) is expected


@pytest.mark.parametrize("raw, expected", [(1, Rank.ACE), (10, Rank.TEN), (13, Rank.KING)])
def test_rank_from_raw(raw, expected):
    assert Rank.from_raw(raw) is expected


@pytest.mark.parametrize("enum_cls, raw", [(Suit, 4), (Suit, -1), (Rank, 0), (Rank, 14)])
def test_from_raw_rejects_out_of_range(enum_cls, raw):
    with pytest.raises(InvalidValueError):
        enum_cls.from_raw(raw)


def test_ace_is_low():
    assert Rank.ACE < Rank.TWO < Rank.KING


@pytest.mark.parametrize(
    "card, expected",
    [
        (Card(Rank.ACE, Suit.SPADE), "A♠"),
        (Card(Rank.TEN, Suit.DIAMOND), "10♦"),
        (Card(Rank.SEVEN, Suit.HEART), "7♥"),
        (Card(Rank.KING, Suit.CLUB), "K♣"),
    ],
)
def test_card_str(card, expected):
    assert str(card) == expected


def test_cards_sort_by_rank_then_suit():
    cards = [parse_card("K♠"), parse_card("A♣"), parse_card("A♠"), parse_card("2♥")]
    assert [str(c) for c in sorted(cards)] == ["A♠", "A♣", "2♥", "K♠"]


def test_card_is_immutable():
    card = Card(Rank.ACE, Suit.SPADE)
    with pytest.raises(AttributeError):
        card.rank = Rank.KING


@pytest.mark.parametrize(
    "text, expected",
    [
        ("A♠", Card(Rank.ACE, Suit.SPADE)),
        ("10d", Card(Rank.TEN, Suit.DIAMOND)),
        ("KH", Card(Rank.KING, Suit.HEART)),
        ("tc", Card(Rank.TEN, Suit.CLUB)),
        (" 3♣ ", Card(Rank.THREE, Suit.CLUB)),
    ],
)
def test_parse_card(text, expected):
    assert parse_card(text) == expected


@pytest.mark.parametrize("text", ["", "A", "X♠", "Az", "14s", "0h"])
def test_parse_card_rejects_garbage(text):
    with pytest.raises(InvalidValueError):
        parse_card(text)
