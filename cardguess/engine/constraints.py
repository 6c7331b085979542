"""
Candidate filtering given game history.

Given:
  - the current candidate space (hands still possible as the answer)
  - a history of (guess, feedback) pairs

Return:
  - the hands that would have produced exactly the recorded feedback for
    every guess, i.e. the hands still consistent with what was observed.

The hidden answer always survives: scoring it against a past guess gives,
by construction, the feedback that was actually observed.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .hands import Hand
from .scoring import Feedback, feedback

# History is a sequence of (guess, feedback) tuples produced by the engine.
History = Iterable[Tuple[Hand, Feedback]]


def filter_candidates(hands: Iterable[Hand], history: History) -> List[Hand]:
    """
    Keep only hands that reproduce every (guess, feedback) in `history` when
    treated as the answer.

    Returns:
      List of consistent hands (order preserved as in `hands`).
    """
    history = list(history)
    out: List[Hand] = []

    for h in hands:
        # Would `h`, as the hidden hand, have produced each recorded signal?
        if all(feedback(h, g) == fb for g, fb in history):
            out.append(h)

    return out
