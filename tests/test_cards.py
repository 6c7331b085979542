import pytest
from cardguess.engine import (DECK, Card, CardParseError, InvalidSelection, Rank, Suit,
                              format_hand, parse_card, parse_cards)


def test_deck_is_52_distinct_cards_in_canonical_order():
    assert len(DECK) == 52
    assert len(set(DECK)) == 52
    assert sorted(DECK) == list(DECK)
    assert DECK[0] == Card(Suit.CLUB, Rank.R2)
    assert DECK[12] == Card(Suit.CLUB, Rank.ACE)
    assert DECK[13] == Card(Suit.DIAMOND, Rank.R2)
    assert DECK[-1] == Card(Suit.SPADE, Rank.ACE)


@pytest.mark.parametrize("token,expected", [
    ("4C", Card(Suit.CLUB, Rank.R4)),
    ("TS", Card(Suit.SPADE, Rank.R10)),
    ("th", Card(Suit.HEART, Rank.R10)),
    ("AD", Card(Suit.DIAMOND, Rank.ACE)),
    ("qc", Card(Suit.CLUB, Rank.QUEEN)),
])
def test_parse_card(token, expected):
    assert parse_card(token) == expected


@pytest.mark.parametrize("token", ["1C", "10C", "4X", "C4", "", "4"])
def test_parse_card_rejects_bad_tokens(token):
    with pytest.raises(CardParseError):
        parse_card(token)


def test_parse_error_is_an_invalid_selection():
    with pytest.raises(InvalidSelection):
        parse_cards("4C ZZ")


def test_parse_cards_keeps_order_and_duplicates():
    cards = parse_cards("  4C 3H\t4C ")
    assert [str(c) for c in cards] == ["4C", "3H", "4C"]


def test_str_and_format_hand():
    assert str(Card(Suit.SPADE, Rank.R10)) == "TS"
    assert format_hand(parse_cards("2d 6s")) == "2D 6S"
    assert format_hand([]) == ""


def test_ranks_compare_numerically():
    assert Rank.R10 < Rank.JACK < Rank.QUEEN < Rank.KING < Rank.ACE
    assert Rank.R2 < Rank.R9
