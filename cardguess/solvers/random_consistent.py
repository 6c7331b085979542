"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate space (hands still
    consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - This is a baseline for comparing strategies; it does not try to maximize
    information gain.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register
from cardguess.engine.hands import Hand


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def _select(self, candidates: List[Hand]) -> Hand:
        i = self.rng.randrange(len(candidates))
        return candidates[i]
