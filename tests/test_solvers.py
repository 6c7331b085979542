import pytest
from cardguess.engine import EmptyCandidateSpace, UnknownSolver, generate_hands, make_hand, parse_cards
from cardguess.solvers import create_solver, get_solver_ids
from cardguess.solvers.expected_left import ExpectedLeftSolver, expected_left, sum_c2


def H(text):
    return make_hand(parse_cards(text))


def test_registry_ids():
    assert get_solver_ids() == ["adaptive", "expected_left", "middle", "random_consistent"]
    assert create_solver().id == "adaptive"


def test_unknown_solver():
    with pytest.raises(UnknownSolver):
        create_solver("nope")
    with pytest.raises(ValueError):
        create_solver("nope")


@pytest.mark.parametrize("solver_id", ["adaptive", "expected_left", "middle", "random_consistent"])
def test_empty_candidates_raise(solver_id):
    with pytest.raises(EmptyCandidateSpace):
        create_solver(solver_id).select([])


def test_expected_left_cost():
    guess = H("2C 3C")
    # all three land in different groups
    assert sum_c2(guess, [H("2C 3C"), H("2C 4C"), H("AS KS")]) == 3
    assert expected_left(guess, [H("2C 3C"), H("2C 4C"), H("AS KS")]) == 1.0
    # 4H 5H and 4D 5D share feedback (0, 0, 0, 2, 0)
    cands = [H("2C 3C"), H("4H 5H"), H("4D 5D")]
    assert sum_c2(guess, cands) == 5
    assert expected_left(guess, cands) == pytest.approx(5 / 3)
    assert expected_left(guess, []) == 0.0


def test_expected_left_picks_minimum_earliest():
    cands = generate_hands(2)[:120]
    pick = ExpectedLeftSolver().select(cands)
    costs = [sum_c2(g, cands) for g in cands]
    best = min(costs)
    assert sum_c2(pick, cands) == best
    assert cands.index(pick) == costs.index(best)


def test_expected_left_tie_goes_to_first():
    # two candidates always split into two singleton groups
    cands = [H("2C 3C"), H("AS KS")]
    assert ExpectedLeftSolver().select(cands) == cands[0]


def test_middle_solver():
    s = create_solver("middle")
    cands = generate_hands(3)[:11]
    assert s.select(cands) == cands[5]
    assert s.select(cands[:1]) == cands[0]
    assert s.select(cands[:2]) == cands[1]


def test_adaptive_uses_expected_left_for_pairs():
    cands = generate_hands(2)[40:160]
    assert create_solver("adaptive").select(cands) == ExpectedLeftSolver().select(cands)


def test_adaptive_uses_middle_for_larger_hands():
    s = create_solver("adaptive")
    for n in (3, 4):
        cands = generate_hands(n)[:1001]
        assert s.select(cands) == cands[500]


def test_select_does_not_mutate():
    cands = generate_hands(2)[:30]
    before = list(cands)
    for sid in get_solver_ids():
        create_solver(sid).select(cands)
    assert cands == before


def test_random_consistent_is_seeded():
    cands = generate_hands(3)[:500]
    a, b = create_solver("random_consistent"), create_solver("random_consistent")
    a.reset(seed=7)
    b.reset(seed=7)
    picks_a = [a.select(cands) for _ in range(5)]
    picks_b = [b.select(cands) for _ in range(5)]
    assert picks_a == picks_b
    assert all(p in cands for p in picks_a)
