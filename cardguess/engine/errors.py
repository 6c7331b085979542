"""
Typed failures raised by the engine and its boundary checks.

Everything derives from CardGuessError so callers can catch the whole family,
but each class also subclasses the builtin it behaves like (ValueError for bad
input, RuntimeError for a broken invariant).
"""

from __future__ import annotations


class CardGuessError(Exception):
    """Base class for all cardguess errors."""


class InvalidHandSize(CardGuessError, ValueError):
    """Hand size outside the supported 2-4 range."""

    def __init__(self, n: int):
        self.n = n
        super().__init__(f"The game can only guess 2-4 cards; got {n}")


class InvalidSelection(CardGuessError, ValueError):
    """A proposed hand is empty or repeats a card."""


class CardParseError(InvalidSelection):
    """A token is not valid two-character card notation."""


class HandSizeMismatch(CardGuessError, ValueError):
    """Guess and answer hold a different number of cards."""


class EmptyCandidateSpace(CardGuessError, RuntimeError):
    """
    The consistency filter removed every candidate.

    With honest feedback the hidden hand always survives filtering, so this
    means the feedback history contradicts itself.
    """


class UnknownSolver(CardGuessError, ValueError):
    """Registry lookup for a solver id that was never registered."""
