"""
Expected Remaining Candidates (ERC).

Idea:
  For guess g, if the CURRENT candidates partition into groups of sizes {c_i}
  by their feedback against g, the expected size of the next candidate space
  (averaging over which group the hidden hand falls in) is:
      E[left | g] = sum_i ( (c_i / n) * c_i ) = (1/n) * sum_i c_i^2
  n is the same for every g in a round, so minimising sum_i c_i^2 is
  equivalent and keeps the comparison in exact integers.

Only candidates are considered as guesses. Ties go to the earliest candidate
in enumeration order. Cost is O(k^2) feedback calls for k candidates.
"""

from __future__ import annotations
from collections import defaultdict
from typing import Dict, List
from .base import BaseSolver, register
from cardguess.engine.hands import Hand
from cardguess.engine.scoring import Feedback, feedback as feedback_fn


def sum_c2(guess: Hand, candidates: List[Hand]) -> int:
    """Sum of squared group sizes when `candidates` are grouped by feedback against `guess`."""
    groups: Dict[Feedback, int] = defaultdict(int)
    _feedback = feedback_fn
    for ans in candidates:
        groups[_feedback(ans, guess)] += 1
    return sum(c * c for c in groups.values())


def expected_left(guess: Hand, candidates: List[Hand]) -> float:
    """E(g): sum of squared group sizes over total candidates."""
    if not candidates:
        return 0.0
    return sum_c2(guess, candidates) / len(candidates)


@register
class ExpectedLeftSolver(BaseSolver):
    id = "expected_left"
    name = "Expected Remaining Candidates"
    version = "1.0.0"

    def _select(self, candidates: List[Hand]) -> Hand:
        best = candidates[0]
        best_sum = None

        for g in candidates:
            s = sum_c2(g, candidates)
            # strict < keeps the earliest hand on ties
            if best_sum is None or s < best_sum:
                best_sum, best = s, g

        return best
