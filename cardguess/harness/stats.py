"""
Summary statistics over a batch of game results.
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate guess counts and timings.

    Returns a JSON-serialisable dict:
      num_cases, solved, success_rate,
      mean_guesses, median_guesses, p90_guesses, max_guesses,
      guess_histogram ({guess count: games}), mean_time_ms
    Guess statistics cover solved games only.
    """
    if not results:
        return {"num_cases": 0, "solved": 0, "success_rate": 0.0}

    solved = np.array([r["guesses"] for r in results if r["success"]], dtype=int)
    times = np.array([float(r["time_ms"]) for r in results], dtype=float)

    out: Dict = {
        "num_cases": len(results),
        "solved": int(solved.size),
        "success_rate": float(solved.size / len(results)),
        "mean_time_ms": round(float(times.mean()), 3),
    }
    if solved.size:
        counts = np.bincount(solved)
        out.update({
            "mean_guesses": round(float(solved.mean()), 4),
            "median_guesses": float(np.median(solved)),
            "p90_guesses": float(np.percentile(solved, 90)),
            "max_guesses": int(solved.max()),
            "guess_histogram": {str(k): int(c) for k, c in enumerate(counts) if c},
        })
    return out


def pretty_summary(summary: Dict) -> str:
    """One-line human summary for console output."""
    if not summary.get("num_cases"):
        return "no cases"
    s = (f"cases={summary['num_cases']} solved={summary['solved']} "
         f"({100.0 * summary['success_rate']:.1f}%)")
    if "mean_guesses" in summary:
        s += (f" | mean={summary['mean_guesses']:.3f} median={summary['median_guesses']:g}"
              f" max={summary['max_guesses']}")
    s += f" | {summary['mean_time_ms']:.1f} ms/game"
    return s
