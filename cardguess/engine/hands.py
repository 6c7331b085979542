"""
Hands and the candidate space.

A Hand is a tuple of distinct cards kept in canonical deck order, so any two
enumerations of the same card set are the same value. The candidate space is
a plain list of hands in enumeration order; that order feeds the solvers'
deterministic tie-breaks, so it must not change between runs.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from .cards import DECK, Card, Rank, Suit
from .errors import InvalidHandSize

Hand = Tuple[Card, ...]

MIN_HAND_SIZE = 2
MAX_HAND_SIZE = 4

# Hand-tuned openers: distinct suits, ranks roughly 13/(n+1) apart.
OPENING_HANDS: Dict[int, Hand] = {
    2: (Card(Suit.DIAMOND, Rank.R2), Card(Suit.SPADE, Rank.R6)),
    3: (Card(Suit.CLUB, Rank.R10), Card(Suit.DIAMOND, Rank.R2), Card(Suit.SPADE, Rank.R6)),
    4: (Card(Suit.CLUB, Rank.R2), Card(Suit.DIAMOND, Rank.R5),
        Card(Suit.HEART, Rank.R7), Card(Suit.SPADE, Rank.R10)),
}


def make_hand(cards: Iterable[Card]) -> Hand:
    """Canonical form of a card collection (sorted into deck order)."""
    return tuple(sorted(cards))


def check_hand_size(n: int) -> None:
    if not MIN_HAND_SIZE <= n <= MAX_HAND_SIZE:
        raise InvalidHandSize(n)


def _choose(n: int, deck: Sequence[Card], start: int) -> List[List[Card]]:
    # choose deck[start] then recurse on the rest, or skip it
    if n == 0:
        return [[]]
    out: List[List[Card]] = []
    for i in range(start, len(deck) - n + 1):
        head = deck[i]
        for rest in _choose(n - 1, deck, i + 1):
            rest.insert(0, head)
            out.append(rest)
    return out


def generate_hands(n: int, deck: Sequence[Card] = DECK) -> List[Hand]:
    """
    Every n-card subset of `deck`, each exactly once.

    Order: all subsets containing deck[0] first (recursively ordered the same
    way), then all subsets without it. For the canonical DECK this is
    lexicographic order by deck position, and each hand comes out already in
    canonical form.

    C(52, 4) = 270,725 hands for n=4.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative; got {n}")
    return [tuple(h) for h in _choose(n, list(deck), 0)]


def opening_hand(n: int) -> Hand:
    """
    First guess for a hand of n cards.

    Raises:
      InvalidHandSize for n outside 2..4.
    """
    check_hand_size(n)
    return OPENING_HANDS[n]
