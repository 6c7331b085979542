"""
Guesser state transitions.

The guesser's state is a pair (last guess, candidate space). These functions
are pure: each returns a new candidate list and never touches the one it was
given.

  initial_guess(n)            -> (opening hand, every other n-card hand)
  refine(guess, fb, state)    -> (next guess, narrowed state)
  next_guess((guess, state), fb) -> same as refine, tuple-in form

Typical loop:
    guess, state = initial_guess(3)
    while True:
        fb = feedback(answer, guess)
        if is_win(guess, fb):
            break
        guess, state = next_guess((guess, state), fb)
"""

from __future__ import annotations

from typing import List, Tuple

from cardguess.engine.constraints import filter_candidates
from cardguess.engine.errors import EmptyCandidateSpace
from cardguess.engine.hands import Hand, generate_hands, opening_hand
from cardguess.engine.scoring import Feedback
from cardguess.logging_utils import get_logger
from cardguess.solvers import BaseSolver, create_solver

log = get_logger(__name__)

CandidateSpace = List[Hand]
GuesserState = Tuple[Hand, CandidateSpace]


def _without(hand: Hand, hands: CandidateSpace) -> CandidateSpace:
    """Copy of `hands` with `hand` removed (if present)."""
    return [h for h in hands if h != hand]


def initial_guess(n: int) -> GuesserState:
    """
    Opening hand for n cards, plus the full candidate space minus that hand.

    Raises:
      InvalidHandSize for n outside 2..4.
    """
    guess = opening_hand(n)
    state = _without(guess, generate_hands(n))
    log.debug("initial guess for n=%d; %d candidates", n, len(state))
    return guess, state


def refine(
        prev_guess: Hand,
        prev_feedback: Feedback,
        state: CandidateSpace,
        solver: BaseSolver | None = None,
) -> GuesserState:
    """
    Narrow `state` to the hands consistent with `prev_feedback` against
    `prev_guess`, then pick the next guess from what is left.

    Args:
      prev_guess    : the hand just played
      prev_feedback : feedback(answer, prev_guess) as reported
      state         : candidate space before this round
      solver        : selection strategy; defaults to the adaptive solver

    Returns:
      (next_guess, new_state) where new_state excludes both hands played.

    Raises:
      EmptyCandidateSpace if no candidate is consistent with the feedback.
    """
    if solver is None:
        solver = create_solver()

    filtered = _without(prev_guess, filter_candidates(state, [(prev_guess, prev_feedback)]))
    if not filtered:
        raise EmptyCandidateSpace(
            f"No hand is consistent with feedback {tuple(prev_feedback)} "
            f"for guess {' '.join(map(str, prev_guess))}")

    guess = solver.select(filtered)
    new_state = _without(guess, filtered)
    log.debug("refine: %d -> %d candidates; solver=%s next=%s",
              len(state), len(filtered), solver.id, " ".join(map(str, guess)))
    return guess, new_state


def next_guess(
        guesser_state: GuesserState,
        prev_feedback: Feedback,
        solver: BaseSolver | None = None,
) -> GuesserState:
    prev_guess, state = guesser_state
    return refine(prev_guess, prev_feedback, state, solver)
