"""
starting_word/eval.py

Rank every admissible first guess by how well it splits the possible answers.

Metrics per guess:
- expected_remaining: expected candidates left after the first score
- max_remaining: size of the largest bucket (worst case)
- worst_score: the score that leaves max_remaining candidates
- has_winning: the guess could itself be the answer

Usage:
  python -m starting_word.eval --csv word_list.csv
  python -m starting_word.eval --csv word_list.csv --solutions --limit-guesses 500
  python -m starting_word.eval --csv word_list.csv --pair crane sloth
"""

from __future__ import annotations

import argparse
import logging
import os
import time
from typing import List, Optional, Sequence

import pandas as pd

from guesser.config import DEFAULT_COMMON, DEFAULT_CSV
from guesser.data_utils import load_common_targets, load_guess_vocab, load_solution_targets
from guesser.feedback import format_score
from guesser.quality import GuessQuality, estimate_pair_quality, evaluate_guesses

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ["guess", "expected_remaining", "max_remaining", "worst_score", "has_winning"]


def evaluate_first_guesses(
    targets: Sequence[str],
    guesses: Optional[Sequence[str]] = None,
    *,
    workers: Optional[int] = None,
) -> List[GuessQuality]:
    """
    Evaluate each candidate first guess against the full answer set.

    Parameters
    ----------
    targets : list[str]
        The possible answers.
    guesses : list[str] | None
        Candidate guesses to score. If None, uses `targets`.
    workers : int | None
        Worker processes for the estimates; None or 1 runs in process.

    Returns
    -------
    list[GuessQuality]
        Best first.
    """
    if not targets:
        raise ValueError("targets must be non-empty")
    pool = list(guesses) if guesses is not None else list(targets)
    logger.debug("evaluating %d first guesses against %d targets", len(pool), len(targets))
    return evaluate_guesses(pool, targets, workers=workers)


def to_frame(results: Sequence[GuessQuality]) -> pd.DataFrame:
    rows = [
        {
            "guess": q.guess,
            "expected_remaining": q.expected_remaining,
            "max_remaining": q.max_remaining,
            "worst_score": format_score(q.score_with_max_remaining),
            "has_winning": q.has_winning,
        }
        for q in results
    ]
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def _print_top(results: Sequence[GuessQuality], k: int = 20) -> None:
    print(f"\nTop {k} starting words by expected_remaining * max_remaining:")
    print(f"{'rank':>4}  {'guess':<8}  {'exp_rem':>8}  {'worst':>5}  {'score':>6}  win")
    for idx, q in enumerate(results[:k], start=1):
        print(
            f"{idx:>4}  {q.guess:<8}  {q.expected_remaining:>8.2f}  {q.max_remaining:>5}  "
            f"{format_score(q.score_with_max_remaining):>6}  {'*' if q.has_winning else ''}"
        )


def main(argv: Optional[Sequence[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Rank first guesses against the possible answers.")
    ap.add_argument("--csv", default=DEFAULT_CSV, help="Path to the word list CSV")
    ap.add_argument("--out", default="starting_word_results.csv", help="Output CSV filename")
    ap.add_argument("--top", type=int, default=20, help="How many top rows to print")
    group = ap.add_mutually_exclusive_group()
    group.add_argument("--common", type=int, default=None, help="Use the N most common words as answers")
    group.add_argument("--solutions", action="store_true", help="Use the official solution list as answers")
    ap.add_argument("--limit-guesses", type=int, default=None, help="Evaluate only the first K guesses (for speed)")
    ap.add_argument("--workers", type=int, default=os.cpu_count(), help="Worker processes (1 = no pool)")
    ap.add_argument("--pair", nargs=2, metavar=("FIRST", "SECOND"), help="Evaluate one two-guess opening")
    ap.add_argument("--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.solutions:
        targets = load_solution_targets(args.csv).words()
    else:
        common = DEFAULT_COMMON if args.common is None else args.common
        targets = load_common_targets(args.csv, common).words()

    if args.pair:
        first, second = (w.lower() for w in args.pair)
        pq = estimate_pair_quality(first, second, targets)
        s1, s2 = pq.scores_with_max_remaining
        print(
            f"{first} + {second} | average {pq.expected_remaining:.2f} left, "
            f"max {pq.max_remaining} left with {format_score(s1)} {format_score(s2)}"
        )
        return

    guesses = load_guess_vocab(args.csv).words()
    if args.limit_guesses is not None:
        guesses = guesses[: args.limit_guesses]

    print(f"Scoring {len(guesses)} guesses against {len(targets)} answers...", flush=True)
    t0 = time.perf_counter()
    results = evaluate_first_guesses(targets, guesses, workers=args.workers)
    dt = time.perf_counter() - t0
    print(f"Done in {dt:.2f}s", flush=True)

    _print_top(results, k=args.top)
    to_frame(results).to_csv(args.out, index=False)
    print(f"Wrote results to {args.out}")


if __name__ == "__main__":
    main()
