from .core import CandidateSpace, GuesserState, initial_guess, next_guess, refine

__all__ = ["CandidateSpace", "GuesserState", "initial_guess", "next_guess", "refine"]
