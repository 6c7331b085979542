from math import comb

import pytest
from cardguess.engine import DECK, InvalidHandSize, generate_hands, make_hand, opening_hand, parse_cards
from cardguess.engine.hands import OPENING_HANDS


@pytest.mark.parametrize("n", [2, 3, 4])
def test_generate_hands_is_complete_and_distinct(n):
    hands = generate_hands(n)
    assert len(hands) == comb(52, n)
    assert len(set(hands)) == len(hands)
    # no permutation duplicates: canonical forms are distinct too
    assert len({frozenset(h) for h in hands}) == len(hands)


@pytest.mark.parametrize("n", [2, 3])
def test_generated_hands_are_canonical(n):
    for h in generate_hands(n):
        assert len(h) == n
        assert h == make_hand(h)


def test_enumeration_order_is_lexicographic_by_deck_position():
    hands = generate_hands(2)
    assert hands[0] == (DECK[0], DECK[1])
    assert hands[1] == (DECK[0], DECK[2])
    assert hands[50] == (DECK[0], DECK[51])
    assert hands[51] == (DECK[1], DECK[2])
    assert hands[-1] == (DECK[50], DECK[51])
    assert hands == sorted(hands)


def test_generate_hands_small_decks():
    deck = DECK[:4]
    assert len(generate_hands(2, deck)) == 6
    assert generate_hands(0, deck) == [()]
    assert generate_hands(5, deck) == []
    assert generate_hands(2, deck) == generate_hands(2, deck)


def test_make_hand_is_order_insensitive():
    assert make_hand(parse_cards("6S 2D")) == make_hand(parse_cards("2D 6S"))


@pytest.mark.parametrize("n,text", [
    (2, "2D 6S"),
    (3, "TC 2D 6S"),
    (4, "2C 5D 7H TS"),
])
def test_opening_hands(n, text):
    h = opening_hand(n)
    assert h == make_hand(parse_cards(text))
    assert h == OPENING_HANDS[n]
    # spread across distinct suits and ranks
    assert len({c.suit for c in h}) == n
    assert len({c.rank for c in h}) == n


@pytest.mark.parametrize("n", [-1, 0, 1, 5, 52])
def test_opening_hand_rejects_other_sizes(n):
    with pytest.raises(InvalidHandSize):
        opening_hand(n)


@pytest.mark.parametrize("n", [2, 3])
def test_enumeration_matches_itertools_combinations(n):
    from itertools import combinations
    assert generate_hands(n) == list(combinations(DECK, n))
