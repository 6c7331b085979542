"""
Interactive game session.

The user types a hidden hand; the guesser plays against it, printing every
guess and its feedback until the hand is found. Input and output go through
the `read` / `out` callables so tests can drive a session without a terminal.

Failure handling:
  - bad answer (unparsable, empty, repeated card, wrong size): message, then
    the prompt comes back
  - bad guess mid-game: "Invalid guess" is printed and the error propagates
    so the caller can exit with a failure status
"""

from __future__ import annotations

from typing import Callable, Sequence

from cardguess.engine import (Card, CardGuessError, InvalidHandSize, InvalidSelection,
                              check_same_size, feedback, format_hand, is_win, make_hand,
                              parse_cards, validate_selection)
from cardguess.game import initial_guess, next_guess
from cardguess.logging_utils import get_logger
from cardguess.solvers import BaseSolver

log = get_logger(__name__)

EXIT_COMMAND = "exit"

BANNER = (
    "- Welcome to the Card Guessing Game!",
    "- Enter the cards (answer) in the format \"4C 3H\"",
    "- Type 'exit' if you wish to leave the game",
)

INVALID_ANSWER = (
    "Invalid answer:  input must be a string of one or more",
    "distinct cards separated by whitespace, where each card",
    "is a single character rank 2-9, T, J, Q, K or A, followed",
    "by a single character suit C, D, H, or S.",
)


def _format_feedback(fb) -> str:
    return "(" + ",".join(str(x) for x in fb) + ")"


def play(answer: Sequence[Card], *, out: Callable[[str], None] = print,
         solver: BaseSolver | None = None) -> int:
    """
    Guess `answer` to the end, printing each round. Returns the guess count.

    Raises:
      InvalidHandSize if the answer is not 2-4 cards,
      InvalidSelection / HandSizeMismatch if a guess is malformed,
      EmptyCandidateSpace if the candidate space runs dry.
    """
    guess, state = initial_guess(len(answer))
    turn = 1
    while True:
        out(f"Guess {turn}:  {format_hand(guess)}")
        try:
            validate_selection(guess)
            check_same_size(answer, guess)
        except CardGuessError:
            out("Invalid guess")
            raise

        fb = feedback(answer, guess)
        out(f"Feedback: {_format_feedback(fb)}")
        if is_win(guess, fb):
            out(f"You got it in {turn} guesses!")
            return turn

        guess, state = next_guess((guess, state), fb, solver)
        turn += 1


def guess_answer(text: str, *, out: Callable[[str], None] = print,
                 solver: BaseSolver | None = None) -> int | None:
    """
    Parse `text` as the hidden hand and play it. Returns the guess count, or
    None when the answer was rejected.
    """
    try:
        cards = parse_cards(text)
        validate_selection(cards)
    except InvalidSelection as e:
        log.debug("rejected answer %r: %s", text, e)
        for line in INVALID_ANSWER:
            out(line)
        return None

    try:
        return play(make_hand(cards), out=out, solver=solver)
    except InvalidHandSize as e:
        out(f"Invalid answer:  {e}")
        return None


def game_loop(*, read: Callable[[str], str] = input, out: Callable[[str], None] = print,
              solver: BaseSolver | None = None) -> None:
    """
    Banner, then prompt for answers until `exit` (or end of input).
    """
    for line in BANNER:
        out(line)
    while True:
        try:
            text = read("- ")
        except EOFError:
            text = EXIT_COMMAND
        if text.strip() == EXIT_COMMAND:
            out("Exiting the game. Goodbye!")
            return
        guess_answer(text, out=out, solver=solver)
