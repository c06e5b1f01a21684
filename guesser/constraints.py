"""
constraints.py

Culls word lists down to the words that agree with the feedback seen so far.
"""

from typing import List, Sequence, Tuple

from guesser.feedback import score_word_pair, format_score


def cull(words: Sequence[str], guess: str, score: int) -> List[str]:
    """
    Keep the words that, taken as the target, give `score` for `guess`.
    Order is preserved and `words` is left untouched.
    """
    format_score(score)  # range check
    return [w for w in words if score_word_pair(guess, w) == score]


def filter_candidates(words: Sequence[str], history: Sequence[Tuple[str, int]]) -> List[str]:
    """
    Keep only candidates that match *all* (guess, score) pairs in history.
    """
    candidates = list(words)
    for guess, score in history:
        candidates = cull(candidates, guess, score)
    return candidates
