"""
Feedback for a single (reference, guess) pair of hands.

The signal is five counts, in this fixed order:
  correct_cards : cards present in both hands
  lower_ranks   : reference cards ranked strictly below the guess's lowest rank
  correct_ranks : shared ranks, each counted up to its smaller multiplicity
  higher_ranks  : reference cards ranked strictly above the guess's highest rank
  correct_suits : shared suits, each counted up to its smaller multiplicity

correct_cards / correct_ranks / correct_suits are symmetric in the two
arguments. lower_ranks / higher_ranks are measured against the guess, so
swapping the arguments generally changes them.

Examples:
  feedback(3C 4H, 4H 3C) -> (2, 0, 2, 0, 2)
  feedback(AC 2C, 3C 4H) -> (0, 1, 0, 1, 1)
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, NamedTuple, Sequence

from .cards import Card


class Feedback(NamedTuple):
    correct_cards: int
    lower_ranks: int
    correct_ranks: int
    higher_ranks: int
    correct_suits: int


def _bag_overlap(xs: Iterable, ys: Iterable) -> int:
    """Size of the multiset intersection (count-min per distinct element)."""
    return sum((Counter(xs) & Counter(ys)).values())


def feedback(reference: Sequence[Card], guess: Sequence[Card]) -> Feedback:
    """
    Score `guess` against `reference`.

    Preconditions:
      - guess is non-empty (its min/max rank bound lower/higher counts)
      - both hands are duplicate-free

    Returns:
      Feedback 5-tuple; every field lies in [0, len(reference)].
    """
    assert guess, "Guess must contain at least one card"

    guess_ranks = [c.rank for c in guess]
    lo = min(guess_ranks)
    hi = max(guess_ranks)

    correct_cards = len(set(reference).intersection(guess))
    lower_ranks = sum(1 for c in reference if c.rank < lo)
    higher_ranks = sum(1 for c in reference if c.rank > hi)
    correct_ranks = _bag_overlap((c.rank for c in reference), guess_ranks)
    correct_suits = _bag_overlap((c.suit for c in reference), (c.suit for c in guess))

    return Feedback(correct_cards, lower_ranks, correct_ranks, higher_ranks, correct_suits)


def is_win(guess: Sequence[Card], fb: Feedback) -> bool:
    """True when the feedback says every guessed card is correct."""
    return fb[0] == len(guess)
