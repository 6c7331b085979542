# apps/cli/run.py
"""
CLI entry point for running cardguess experiments.

This script:
  1) Enumerates every hidden hand of the requested size (or a seeded sample).
  2) Instantiates the requested solver and plays each case to the end,
     with a live progress indicator.
  3) Prints a one-line summary and writes:
       - CSV:  per-case results + guess/feedback history columns
       - JSON: manifest with config, summary, git commit, etc.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from tqdm import tqdm

from cardguess.engine import generate_hands
from cardguess.harness import run_batch, select_cases, summarize, pretty_summary
from cardguess.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from cardguess.logging_utils import LOG_LEVEL, setup_logging
from cardguess.solvers import DEFAULT_SOLVER, get_solver_ids


def _plain_progress(total: int):
    """Progress wrapper that rewrites one stderr line at most once a second."""
    def wrap(cases):
        start = time.time()
        last_print = 0.0
        for idx, case in enumerate(cases, 1):
            yield case
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now
        sys.stderr.write("\n")
        sys.stderr.flush()
    return wrap


def main(argv=None) -> int:
    """
    Parse CLI args, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="cardguess: run solver experiments")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--size", type=int, default=2, choices=[2, 3, 4],
                    help="cards in the hidden hand")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of hands (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-turns", type=int,
                    help="give up on a case after this many guesses (default: never)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default=LOG_LEVEL,
                    help="DEBUG / INFO / WARNING / ERROR (default from LOG_LEVEL)")
    args = ap.parse_args(argv)

    setup_logging(args.log_level)

    # 1) Choose cases (deterministic sample by seed)
    cases = select_cases(generate_hands(args.size), sample=args.sample, seed=args.seed)
    total = len(cases)

    # 2) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    if mode == "bar":
        progress = lambda it: tqdm(it, total=total, ncols=80, desc=args.solver, unit="game")
    elif mode == "plain":
        progress = _plain_progress(total)
    else:
        progress = None

    # 3) Run batch
    results = run_batch(cases, solver_id=args.solver, max_turns=args.max_turns,
                        seed=args.seed, progress=progress)
    summary = summarize(results)
    print(pretty_summary(summary))

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), n=args.size)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "summary": summary,
        "num_cases": len(results),
        "solver_id": args.solver,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
