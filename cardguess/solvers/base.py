from __future__ import annotations
import random
from typing import Dict, List, Type

from cardguess.engine.errors import EmptyCandidateSpace
from cardguess.engine.hands import Hand

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A selection strategy: given the filtered candidate space (previous guess
    already removed), pick the next hand to play. Solvers never filter and
    never mutate the list they are handed.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.rng = random.Random()

    def reset(self, *, seed: int | None = None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    def select(self, candidates: List[Hand]) -> Hand:
        if not candidates:
            raise EmptyCandidateSpace("No candidate hands left to choose from")
        return self._select(candidates)

    def _select(self, candidates: List[Hand]) -> Hand:
        raise NotImplementedError("Override in subclass")
