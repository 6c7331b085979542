from .cards import DECK, Card, Rank, Suit, format_hand, parse_card, parse_cards
from .constraints import filter_candidates
from .errors import (CardGuessError, CardParseError, EmptyCandidateSpace, HandSizeMismatch,
                     InvalidHandSize, InvalidSelection, UnknownSolver)
from .hands import Hand, generate_hands, make_hand, opening_hand
from .scoring import Feedback, feedback, is_win
from .validation import check_same_size, is_valid_selection, validate_selection

__all__ = [
    "DECK", "Card", "Rank", "Suit", "format_hand", "parse_card", "parse_cards",
    "filter_candidates",
    "CardGuessError", "CardParseError", "EmptyCandidateSpace", "HandSizeMismatch",
    "InvalidHandSize", "InvalidSelection", "UnknownSolver",
    "Hand", "generate_hands", "make_hand", "opening_hand",
    "Feedback", "feedback", "is_win",
    "check_same_size", "is_valid_selection", "validate_selection",
]
