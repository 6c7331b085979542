"""
Boundary checks for user-supplied hands.

These run once per round, before any core operation. The core itself assumes
well-formed, size-consistent, duplicate-free hands.
"""

from __future__ import annotations

from typing import Sequence

from .cards import Card
from .errors import HandSizeMismatch, InvalidSelection


def is_valid_selection(cards: Sequence[Card]) -> bool:
    """True iff `cards` is non-empty and has no repeats."""
    return bool(cards) and len(set(cards)) == len(cards)


def validate_selection(cards: Sequence[Card]) -> None:
    """
    Raise InvalidSelection for an empty hand or one that repeats a card.
    """
    if not cards:
        raise InvalidSelection("Hand must contain at least one card")
    if len(set(cards)) != len(cards):
        raise InvalidSelection("Hand must not repeat a card")


def check_same_size(answer: Sequence[Card], guess: Sequence[Card]) -> None:
    if len(answer) != len(guess):
        raise HandSizeMismatch(
            f"Guess has {len(guess)} cards but the answer has {len(answer)}")
