"""
quality.py

How good is a guess against the whole list of words that could still be the
answer?

For a guess we build a histogram over the 243 possible scores, one count per
candidate target. Whatever the real answer is, it lands in one bucket, and
that bucket's count is how many candidates would survive. So:

- expected_remaining: sum(count^2) / N, the surviving count averaged over
  every candidate being equally likely to be the answer
- max_remaining: the biggest bucket (worst case)
- has_winning: the all-green bucket is non-empty, i.e. the guess itself is
  still a candidate

Guesses are then sorted by max_remaining * expected_remaining.
"""

from __future__ import annotations

import logging
import multiprocessing as mp
from dataclasses import dataclass
from functools import partial
from typing import List, Optional, Sequence, Tuple

import numpy as np

from guesser.config import ALL_CORRECT, DEFAULT_CHUNKSIZE, NUM_SCORES
from guesser.feedback import score_word_pair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuessQuality:
    has_winning: bool
    expected_remaining: float
    max_remaining: int
    score_with_max_remaining: int
    guess: str

    @property
    def cost(self) -> float:
        return self.max_remaining * self.expected_remaining


@dataclass(frozen=True)
class PairQuality:
    expected_remaining: float
    max_remaining: int
    scores_with_max_remaining: Tuple[int, int]
    guesses: Tuple[str, str]


# ---------- Histograms ----------

def _require_targets(targets: Sequence[str]) -> None:
    if len(targets) == 0:
        raise ValueError("targets must be non-empty")


def score_histogram(guess: str, targets: Sequence[str]) -> np.ndarray:
    """Counts of each score (0..242) for `guess` across `targets`."""
    _require_targets(targets)
    codes = np.fromiter(
        (score_word_pair(guess, t) for t in targets), dtype=np.int64, count=len(targets)
    )
    return np.bincount(codes, minlength=NUM_SCORES)


def pair_histogram(first: str, second: str, targets: Sequence[str]) -> np.ndarray:
    """Counts of each (score1, score2) outcome, flattened as score1 * 243 + score2."""
    _require_targets(targets)
    codes = np.fromiter(
        (score_word_pair(first, t) * NUM_SCORES + score_word_pair(second, t) for t in targets),
        dtype=np.int64,
        count=len(targets),
    )
    return np.bincount(codes, minlength=NUM_SCORES * NUM_SCORES)


def reduce_histogram(histogram: np.ndarray, total: int) -> Tuple[float, int, int]:
    """
    Returns (expected_remaining, max_remaining, index_with_max).

    The lowest index wins a tie for the biggest bucket.
    """
    if total <= 0:
        raise ValueError("total must be positive")
    counts = np.asarray(histogram, dtype=np.int64)
    # argmax returns the first occurrence of the maximum
    index_with_max = int(np.argmax(counts))
    max_remaining = int(counts[index_with_max])
    expected_remaining = float(np.dot(counts, counts)) / total
    return expected_remaining, max_remaining, index_with_max


# ---------- Estimators ----------

def estimate_guess_quality(guess: str, targets: Sequence[str]) -> GuessQuality:
    """Score a single candidate guess word against the list of remaining words."""
    histogram = score_histogram(guess, targets)
    expected, max_remaining, score_with_max = reduce_histogram(histogram, len(targets))
    return GuessQuality(
        has_winning=bool(histogram[ALL_CORRECT] > 0),
        expected_remaining=expected,
        max_remaining=max_remaining,
        score_with_max_remaining=score_with_max,
        guess=guess,
    )


def estimate_pair_quality(first: str, second: str, targets: Sequence[str]) -> PairQuality:
    """Score two guesses played back to back, both chosen before any feedback."""
    histogram = pair_histogram(first, second, targets)
    expected, max_remaining, index_with_max = reduce_histogram(histogram, len(targets))
    return PairQuality(
        expected_remaining=expected,
        max_remaining=max_remaining,
        scores_with_max_remaining=divmod(index_with_max, NUM_SCORES),
        guesses=(first, second),
    )


# ---------- Ranking ----------

def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_guess_quality(a: GuessQuality, b: GuessQuality) -> int:
    """
    Negative if `a` should be suggested before `b`.

    1. max_remaining * expected_remaining, smaller first
    2. guesses that might win first
    3. max_remaining, smaller first
    4. expected_remaining, smaller first
    5. alphabetical
    """
    return (
        _cmp(a.cost, b.cost)
        or _cmp(b.has_winning, a.has_winning)
        or _cmp(a.max_remaining, b.max_remaining)
        or _cmp(a.expected_remaining, b.expected_remaining)
        or _cmp(a.guess, b.guess)
    )


def ranking_key(q: GuessQuality) -> tuple:
    """Sort key equivalent to compare_guess_quality."""
    return (q.cost, not q.has_winning, q.max_remaining, q.expected_remaining, q.guess)


def rank_guesses(qualities: Sequence[GuessQuality]) -> List[GuessQuality]:
    return sorted(qualities, key=ranking_key)


def evaluate_guesses(
    guesses: Sequence[str],
    targets: Sequence[str],
    *,
    workers: Optional[int] = None,
    chunksize: int = DEFAULT_CHUNKSIZE,
) -> List[GuessQuality]:
    """
    Estimate every guess against `targets` and return them best first.

    Each estimate is independent, so with `workers` > 1 they are spread over a
    process pool; the sort happens once all of them are back, which keeps the
    output identical to a single-process run.
    """
    _require_targets(targets)
    targets = list(targets)
    job = partial(estimate_guess_quality, targets=targets)

    if workers is not None and workers > 1 and len(guesses) > chunksize:
        logger.debug("estimating %d guesses on %d workers", len(guesses), workers)
        with mp.Pool(processes=workers) as pool:
            qualities = pool.map(job, guesses, chunksize=chunksize)
    else:
        logger.debug("estimating %d guesses in process", len(guesses))
        qualities = [job(g) for g in guesses]

    return rank_guesses(qualities)

