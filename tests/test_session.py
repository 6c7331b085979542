import pytest
from cardguess.engine import HandSizeMismatch, opening_hand
from cardguess.harness import session
from cardguess.harness.session import BANNER, INVALID_ANSWER, game_loop, guess_answer


def _scripted(lines):
    it = iter(lines)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        return next(it)
    return read, prompts


def test_game_loop_plays_and_exits():
    out = []
    read, prompts = _scripted(["4C 3H", "exit"])
    game_loop(read=read, out=out.append)
    assert out[:3] == list(BANNER)
    assert out[3] == "Guess 1:  2D 6S"
    assert out[4] == "Feedback: (0,0,0,0,0)"
    assert out[-2].startswith("You got it in ")
    assert out[-1] == "Exiting the game. Goodbye!"
    assert prompts == ["- ", "- "]


def test_guess_lines_alternate_with_feedback():
    out = []
    n = guess_answer("TC 2D 6S", out=out.append)
    assert n == 1
    assert out == ["Guess 1:  TC 2D 6S", "Feedback: (3,0,3,0,3)", "You got it in 1 guesses!"]


def test_guess_answer_counts_rounds():
    out = []
    n = guess_answer("4c 3h 2d", out=out.append)
    assert n is not None
    assert out[-1] == f"You got it in {n} guesses!"
    assert sum(1 for line in out if line.startswith("Guess ")) == n
    assert out[-2] == "Feedback: (3,0,3,0,3)"


@pytest.mark.parametrize("text", ["", "   ", "4C 4C", "4C ZZ", "10C 3H"])
def test_invalid_answers_are_reported(text):
    out = []
    assert guess_answer(text, out=out.append) is None
    assert out == list(INVALID_ANSWER)


@pytest.mark.parametrize("text", ["4C", "4C 3H 2D 5S 6S"])
def test_unsupported_hand_size_is_reported(text):
    out = []
    assert guess_answer(text, out=out.append) is None
    assert len(out) == 1
    assert out[0].startswith("Invalid answer:")
    assert "2-4" in out[0]


def test_invalid_answer_then_prompt_again():
    out = []
    read, prompts = _scripted(["4C 4C", "exit"])
    game_loop(read=read, out=out.append)
    assert INVALID_ANSWER[0] in out
    assert len(prompts) == 2


def test_end_of_input_exits():
    out = []

    def read(prompt):
        raise EOFError

    game_loop(read=read, out=out.append)
    assert out[-1] == "Exiting the game. Goodbye!"


def test_mismatched_guess_aborts(monkeypatch):
    monkeypatch.setattr(session, "initial_guess", lambda n: (opening_hand(2), []))
    out = []
    read, _ = _scripted(["4C 3H 2D", "exit"])
    with pytest.raises(HandSizeMismatch):
        game_loop(read=read, out=out.append)
    assert out[-2:] == ["Guess 1:  2D 6S", "Invalid guess"]
