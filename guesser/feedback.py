"""
Feedback utilities for Wordle.

A guess scored against a target is a 5-digit base-3 number, one digit per
letter position, with the FIRST letter in the LOWEST digit:

    0 = letter not in target   (shown as '.')
    1 = right letter, wrong place (yellow, shown as 'y')
    2 = right letter, right place (green, shown as 'G')

Guessing "caddy" against "abbey" gives digits [0, 1, 0, 0, 2], i.e.
0*1 + 1*3 + 0*9 + 0*27 + 2*81 = 165, which reads as ".y..G".

Scores are NOT symmetric: score_word_pair("sorry", "rotor") == 42 while
score_word_pair("rotor", "sorry") == 88.
"""

from __future__ import annotations

import operator
from typing import List, Optional

from guesser.config import WORD_LENGTH, NUM_SCORES, SCORE_CHARS

_PARSE_DIGITS = {".": 0, "y": 1, "g": 2}


def _check_word(word: str, role: str) -> None:
    if not isinstance(word, str):
        raise TypeError(f"{role} must be a string, got {type(word).__name__}")
    if len(word) != WORD_LENGTH:
        raise ValueError(f"{role} '{word}' is not exactly length {WORD_LENGTH}")


# ---------- Codec ----------

def format_score(score: int) -> str:
    """Turn a numeric score into something readable. 165 => '.y..G'"""
    if isinstance(score, bool):
        raise TypeError("score must be an int, got bool")
    # numpy integers from the histograms are fine too
    score = operator.index(score)
    if score < 0 or score >= NUM_SCORES:
        raise ValueError(f"{score} is not in 0..{NUM_SCORES - 1}")

    chars = []
    for _ in range(WORD_LENGTH):
        chars.append(SCORE_CHARS[score % 3])
        score //= 3
    return "".join(chars)


def parse_score(readable: str) -> Optional[int]:
    """
    Turn a readable string back into a numeric score. '.y..G' => 165

    Accepts '.', 'y'/'Y' and 'g'/'G'. Returns None for anything else or for
    a string that is not exactly WORD_LENGTH characters long.
    """
    if not isinstance(readable, str) or len(readable) != WORD_LENGTH:
        return None

    result = 0
    mult = 1
    for ch in readable:
        digit = _PARSE_DIGITS.get(ch.lower())
        if digit is None:
            return None
        result += digit * mult
        mult *= 3
    return result


def pattern_to_int(pattern: List[int]) -> int:
    """
    Encode a per-position pattern [p0, ..., p4] (each in {0,1,2}) as a score.

    p0 belongs to the first letter and lands in the lowest base-3 digit, so
    pattern_to_int(score_pattern(g, t)) == score_word_pair(g, t).
    """
    if not isinstance(pattern, (list, tuple)):
        raise TypeError("pattern must be a list or tuple of integers in {0,1,2}")
    if len(pattern) != WORD_LENGTH:
        raise ValueError(f"pattern must have length {WORD_LENGTH}")
    value = 0
    for p in reversed(pattern):
        if isinstance(p, bool) or not isinstance(p, int) or p not in (0, 1, 2):
            raise ValueError("pattern elements must be integers in {0,1,2}")
        value = value * 3 + p
    return value


def int_to_pattern(score: int) -> List[int]:
    """Inverse of pattern_to_int."""
    format_score(score)  # range check
    score = operator.index(score)
    digits = []
    for _ in range(WORD_LENGTH):
        digits.append(score % 3)
        score //= 3
    return digits


# ---------- Scoring ----------

def score_word_pair_simple(guess: str, target: str) -> int:
    """
    Reference two-pass scorer.

    Exact matches are paired FIRST and marked off, so for "cheer" against
    "abbey" the second 'e' is green and the first 'e' is not yellow. Then
    each remaining guess letter takes the leftmost unused target slot with
    the same letter.
    """
    _check_word(guess, "guess")
    _check_word(target, "target")

    guess_used = 0
    target_used = 0
    result = 0

    mult = 1
    for i in range(WORD_LENGTH):
        if guess[i] == target[i]:
            result += 2 * mult
            guess_used |= 1 << i
            target_used |= 1 << i
        mult *= 3

    mult = 1
    for i in range(WORD_LENGTH):
        if guess_used & (1 << i):
            mult *= 3
            continue
        g = guess[i]
        for j in range(WORD_LENGTH):
            if target_used & (1 << j):
                continue
            if g == target[j]:
                guess_used |= 1 << i
                target_used |= 1 << j
                result += mult
                break
        mult *= 3

    return result


def score_word_pair(guess: str, target: str) -> int:
    """
    Score `guess` against `target`. Same output as score_word_pair_simple.

    This is the hot path (every guess against every candidate, every round),
    so the loops are unrolled for five letters. A guess position that is
    green never looks for a yellow, and a target position that is green is
    never handed out as a yellow; both share the `used` bitfield.
    """
    if WORD_LENGTH != 5:
        raise AssertionError(
            f"WORD_LENGTH is {WORD_LENGTH} but score_word_pair was hand-optimized for 5"
        )
    if len(guess) != 5:
        raise ValueError(f"guess '{guess}' is not exactly length {WORD_LENGTH}")
    if len(target) != 5:
        raise ValueError(f"target '{target}' is not exactly length {WORD_LENGTH}")

    g0, g1, g2, g3, g4 = guess
    t0, t1, t2, t3, t4 = target

    result = 0
    used = 0
    if g0 == t0:
        result += 2
        used |= 1
    if g1 == t1:
        result += 6
        used |= 2
    if g2 == t2:
        result += 18
        used |= 4
    if g3 == t3:
        result += 54
        used |= 8
    if g4 == t4:
        result += 162
        used |= 16

    # Nothing left to pair up.
    if used == 31:
        return result

    guess_used = used

    if not guess_used & 1:
        if t1 == g0 and not used & 2:
            used |= 2
            result += 1
        elif t2 == g0 and not used & 4:
            used |= 4
            result += 1
        elif t3 == g0 and not used & 8:
            used |= 8
            result += 1
        elif t4 == g0 and not used & 16:
            used |= 16
            result += 1

    if not guess_used & 2:
        if t0 == g1 and not used & 1:
            used |= 1
            result += 3
        elif t2 == g1 and not used & 4:
            used |= 4
            result += 3
        elif t3 == g1 and not used & 8:
            used |= 8
            result += 3
        elif t4 == g1 and not used & 16:
            used |= 16
            result += 3

    if not guess_used & 4:
        if t0 == g2 and not used & 1:
            used |= 1
            result += 9
        elif t1 == g2 and not used & 2:
            used |= 2
            result += 9
        elif t3 == g2 and not used & 8:
            used |= 8
            result += 9
        elif t4 == g2 and not used & 16:
            used |= 16
            result += 9

    if not guess_used & 8:
        if t0 == g3 and not used & 1:
            used |= 1
            result += 27
        elif t1 == g3 and not used & 2:
            used |= 2
            result += 27
        elif t2 == g3 and not used & 4:
            used |= 4
            result += 27
        elif t4 == g3 and not used & 16:
            used |= 16
            result += 27

    # Last letter: only need to know whether a slot is left, not which one.
    if not guess_used & 16:
        if (
            (t0 == g4 and not used & 1)
            or (t1 == g4 and not used & 2)
            or (t2 == g4 and not used & 4)
            or (t3 == g4 and not used & 8)
        ):
            result += 81

    return result


def score_pattern(guess: str, target: str) -> List[int]:
    """
    Per-position feedback for `guess` against `target`.

    Returns a list of WORD_LENGTH ints in {0, 1, 2}; index 0 is the first
    letter of the guess.
    """
    return int_to_pattern(score_word_pair(guess, target))


def consistent_with(word: str, guess: str, score: int) -> bool:
    """
    True if `word`, taken as the target, would have produced `score` for `guess`.
    """
    format_score(score)  # range check
    return score_word_pair(guess, word) == score
