from __future__ import annotations
from typing import List
from cardguess.engine.errors import UnknownSolver
from .base import BaseSolver, REGISTRY, register

from . import expected_left  # noqa: F401
from . import middle  # noqa: F401
from . import adaptive  # noqa: F401
from . import random_consistent  # noqa: F401

DEFAULT_SOLVER = "adaptive"


def create_solver(solver_id: str = DEFAULT_SOLVER) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise UnknownSolver(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
