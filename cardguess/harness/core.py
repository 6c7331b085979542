"""
Experiment harness core primitives.

- run_case:  play one game (one hidden hand) with a given solver.
- run_batch: play many games in sequence (optionally a seeded sample).

These functions are intentionally UI-agnostic so they can be reused by the
CLI apps, a notebook, or tests without changes.
"""

from __future__ import annotations
import random
import time
from typing import Dict, List, Sequence, Tuple

from cardguess.engine import (Card, Feedback, Hand, check_same_size, feedback, format_hand,
                              is_win, make_hand, validate_selection)
from cardguess.game import initial_guess, next_guess
from cardguess.logging_utils import get_logger
from cardguess.solvers import DEFAULT_SOLVER, BaseSolver, create_solver

log = get_logger(__name__)

# None means play until the hand is found; the candidate space is finite.
DEFAULT_MAX_TURNS = None


def run_case(
        answer: Sequence[Card],
        *,
        solver: BaseSolver | None = None,
        max_turns: int | None = DEFAULT_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the solver finds `answer` or the turn budget runs out.

    Args:
        answer:     the hidden hand (2-4 distinct cards, any order)
        solver:     selection strategy; defaults to the adaptive solver
        max_turns:  optional cap on guesses; None plays to the end
        seed:       RNG seed to make solver tie-breaks reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(Hand, Feedback)]), answer (Hand), solver_id (str)

    Raises:
        InvalidSelection / InvalidHandSize for a malformed answer,
        EmptyCandidateSpace if the candidate space is ever exhausted.
    """
    validate_selection(answer)
    answer = make_hand(answer)
    if solver is None:
        solver = create_solver(DEFAULT_SOLVER)
    solver.reset(seed=seed)

    history: List[Tuple[Hand, Feedback]] = []
    success = False

    t0 = time.perf_counter()
    guess, state = initial_guess(len(answer))
    while True:
        check_same_size(answer, guess)
        fb = feedback(answer, guess)
        history.append((guess, fb))

        if is_win(guess, fb):
            success = True
            break
        if max_turns is not None and len(history) >= max_turns:
            break

        # Narrow the candidate space using the new feedback before next turn
        guess, state = next_guess((guess, state), fb, solver)
    dt = (time.perf_counter() - t0) * 1000.0

    log.debug("case %s: success=%s guesses=%d (%.1f ms)",
              format_hand(answer), success, len(history), dt)
    return {
        "success": success, "guesses": len(history), "time_ms": dt,
        "history": history, "answer": answer, "solver_id": solver.id,
    }


def select_cases(answers: List[Hand], *, sample: int | None = None,
                 seed: int | None = None) -> List[Hand]:
    """
    Pick which hidden hands to play: all of them, or a deterministic sample
    without replacement when `sample` is smaller than the pool.
    """
    if sample is None or sample >= len(answers):
        return list(answers)
    rng = random.Random(seed)
    return rng.sample(answers, sample)


def run_batch(
        answers: List[Hand],
        *,
        solver_id: str = DEFAULT_SOLVER,
        max_turns: int | None = DEFAULT_MAX_TURNS,
        seed: int | None = None,
        progress=None,
) -> List[Dict]:
    """
    Run many cases back-to-back with one solver instance.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index). `progress`, if given, wraps
    the iterable of cases (e.g. a tqdm factory).
    """
    solver = create_solver(solver_id)
    cases = progress(answers) if progress is not None else answers

    out: List[Dict] = []
    for idx, ans in enumerate(cases, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(ans, solver=solver, max_turns=max_turns, seed=case_seed))

    log.info("batch done: solver=%s cases=%d solved=%d",
             solver_id, len(out), sum(1 for r in out if r["success"]))
    return out
