"""
Adaptive solver (the default).

  - 2-card hands: expected-left search. C(52, 2) is small enough that the
    O(k^2) cost is affordable every round.
  - 3 and 4-card hands: middle candidate.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register
from .expected_left import ExpectedLeftSolver
from .middle import MiddleSolver
from cardguess.engine.hands import Hand

# Largest hand size that still gets the full expected-left search.
EXHAUSTIVE_MAX_HAND_SIZE = 2


@register
class AdaptiveSolver(BaseSolver):
    id = "adaptive"
    name = "Adaptive (expected-left for pairs, middle otherwise)"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self._exhaustive = ExpectedLeftSolver()
        self._cheap = MiddleSolver()

    def _select(self, candidates: List[Hand]) -> Hand:
        if len(candidates[0]) <= EXHAUSTIVE_MAX_HAND_SIZE:
            return self._exhaustive.select(candidates)
        return self._cheap.select(candidates)
