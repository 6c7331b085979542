# apps/cli/play.py
"""
Interactive card guessing game.

Type a hidden hand such as "4C 3H" and watch the guesser find it. Type
'exit' to leave. Exits with status 1 if a guess is ever invalid.
"""

from __future__ import annotations

import argparse
import sys

from cardguess.engine import CardGuessError
from cardguess.harness.session import game_loop
from cardguess.logging_utils import LOG_LEVEL, get_logger, setup_logging
from cardguess.solvers import DEFAULT_SOLVER, create_solver, get_solver_ids

log = get_logger("cardguess.play")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="cardguess: interactive guessing game")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--seed", type=int, help="RNG seed for randomised solvers")
    ap.add_argument("--log-level", default=LOG_LEVEL,
                    help="DEBUG / INFO / WARNING / ERROR (default from LOG_LEVEL)")
    args = ap.parse_args(argv)

    setup_logging(args.log_level)
    solver = create_solver(args.solver)
    solver.reset(seed=args.seed)

    try:
        game_loop(solver=solver)
    except CardGuessError as e:
        log.error("aborting: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
