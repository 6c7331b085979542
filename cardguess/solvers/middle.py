"""
Middle-of-the-list solver.

Picks the candidate at index k // 2. Candidates are in enumeration order, so
this is a cheap O(1) stand-in for the O(k^2) expected-left search; on 3 and 4
card hands it converges in about as many guesses.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register
from cardguess.engine.hands import Hand


@register
class MiddleSolver(BaseSolver):
    id = "middle"
    name = "Middle Candidate"
    version = "1.0.0"

    def _select(self, candidates: List[Hand]) -> Hand:
        return candidates[len(candidates) // 2]
