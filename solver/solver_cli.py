"""
solver/solver_cli.py

Interactive Wordle helper (human-in-the-loop):
- The helper shows the words that could still be the answer and a ranked
  list of suggested guesses.
- YOU type the guess you played and the score the game gave it, in ".y.GG"
  form, and the helper culls the candidates.
- Repeat until one (or two) candidates remain.

Run:
  python -m solver.solver_cli --csv word_list.csv
  python -m solver.solver_cli --csv word_list.csv --hard --common 3000
  python -m solver.solver_cli --csv word_list.csv --solutions

Shortcuts:
  quit / q / exit  -> exit
"""
from __future__ import annotations

import argparse
import logging
import os
import shutil
import textwrap
from typing import Callable, List, Optional, Sequence

from guesser.config import (
    DEFAULT_COMMON,
    DEFAULT_CSV,
    DEFAULT_TOP_SHOWN,
    MAX_CANDIDATES_SHOWN,
    MAX_TARGETS_SHOWN,
    MAX_WINNING_SHOWN,
    WORD_LENGTH,
)
from guesser.constraints import cull
from guesser.data_utils import load_common_targets, load_guess_vocab, load_solution_targets
from guesser.feedback import format_score, parse_score, score_word_pair
from guesser.quality import GuessQuality, evaluate_guesses

logger = logging.getLogger(__name__)

QUIT_WORDS = {"q", "quit", "exit"}

SCORE_HELP = f"""
Scores should be entered as {WORD_LENGTH} characters, with this code:
  . = letter that did not match anything
  y = (yellow) letter that's in the word but in the wrong place
  G = (GREEN) the right letter in the right place
"""


class QuitRequested(Exception):
    """The user typed one of the quit words."""


def format_suggestion(q: GuessQuality, targets: Sequence[str], max_targets: int = MAX_TARGETS_SHOWN) -> str:
    """One suggestion row, with a few of the targets left in its worst bucket."""
    worst = []
    for w in targets:
        if score_word_pair(q.guess, w) == q.score_with_max_remaining:
            worst.append(w)
            if len(worst) > max_targets:
                break
    more = "..." if len(worst) > max_targets else ""
    return (
        f"{'*' if q.has_winning else ' '} {q.guess} | average {q.expected_remaining:.1f} left, "
        f"max {q.max_remaining} left with {format_score(q.score_with_max_remaining)} => "
        f"{' '.join(worst[:max_targets])}{more}"
    )


def suggestion_lines(
    ranked: Sequence[GuessQuality], targets: Sequence[str], *, top: int = DEFAULT_TOP_SHOWN
) -> List[str]:
    """
    The first `top` suggestions, plus any later ones that could win outright.
    Runs of skipped rows collapse into a single "omitted" line.
    """
    lines: List[str] = []
    num_winning = 0
    num_skipped = 0
    for i, q in enumerate(ranked):
        if i < top or q.has_winning:
            if num_skipped > 0:
                lines.append(f"   ... ({num_skipped} words omitted) ...")
                num_skipped = 0
            lines.append(format_suggestion(q, targets))
        else:
            num_skipped += 1

        if q.has_winning:
            num_winning += 1

        if num_winning > MAX_WINNING_SHOWN and i > 10:
            break
    return lines


def describe_candidates(targets: Sequence[str], max_shown: int = MAX_CANDIDATES_SHOWN) -> str:
    shown = " ".join(targets[:max_shown])
    if len(targets) > max_shown:
        shown += "..."
    width = shutil.get_terminal_size().columns
    return f"There are {len(targets)} possibilities for the word.\n\n{textwrap.fill(shown, width=width)}"


def read_guess(prompt: Callable[[str], str]) -> str:
    while True:
        raw = prompt("\nPlease enter the guess you'll use: ").strip().lower()
        if raw in QUIT_WORDS:
            raise QuitRequested()
        if len(raw) == WORD_LENGTH and raw.isalpha():
            return raw
        print(f"\nYour guess of '{raw}' was not exactly {WORD_LENGTH} letters.")


def read_score(prompt: Callable[[str], str]) -> int:
    while True:
        raw = prompt('Enter the score you got for that word, in ".y.GG" format: ').strip()
        if raw.lower() in QUIT_WORDS:
            raise QuitRequested()
        score = parse_score(raw)
        if score is not None:
            return score
        print(SCORE_HELP)


def play(
    guesses: Sequence[str],
    targets: Sequence[str],
    *,
    hard: bool = False,
    top: int = DEFAULT_TOP_SHOWN,
    workers: Optional[int] = None,
    prompt: Optional[Callable[[str], str]] = None,
) -> Optional[str]:
    """
    Run the suggest / read guess / read score loop.

    Returns the answer once only one word is left, else None.
    """
    if prompt is None:
        prompt = input
    guesses = list(guesses)
    targets = list(targets)

    while True:
        if not targets:
            print("Somehow, there are no possible words remaining. "
                  "Did you enter your guesses and scores correctly?")
            return None
        if len(targets) == 1:
            print(f"The word is: {targets[0]}")
            return targets[0]

        print(describe_candidates(targets), flush=True)
        if len(targets) == 2:
            # Guess one of them; if it's not that, it's the other.
            return None

        ranked = evaluate_guesses(guesses, targets, workers=workers)
        print("\nSUGGESTED GUESSES (sorted by expected_remaining * max_remaining)")
        print("=" * 78)
        for line in suggestion_lines(ranked, targets, top=top):
            print(line)

        try:
            guess = read_guess(prompt)
            score = read_score(prompt)
        except QuitRequested:
            print("bye!")
            return None

        targets = cull(targets, guess, score)
        if hard:
            guesses = cull(guesses, guess, score)
        logger.debug("after %s %s: %d targets, %d guesses",
                     guess, format_score(score), len(targets), len(guesses))


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Suggest good guesses for a five-letter word-guessing game."
    )
    ap.add_argument("--csv", default=DEFAULT_CSV, help="Path to the word list CSV")
    ap.add_argument(
        "--hard",
        action="store_true",
        help="Hard mode: later guesses must agree with the scores seen so far",
    )
    group = ap.add_mutually_exclusive_group()
    group.add_argument(
        "--common",
        type=int,
        default=None,
        help=f"Use the N most common words as possible answers (default {DEFAULT_COMMON})",
    )
    group.add_argument(
        "--solutions",
        action="store_true",
        help="Use the official solution list (rows with a 'day') as possible answers",
    )
    ap.add_argument("--top", type=int, default=DEFAULT_TOP_SHOWN, help="How many suggestions to print")
    ap.add_argument(
        "--workers",
        type=int,
        default=os.cpu_count(),
        help="Worker processes used to score guesses (1 = no pool)",
    )
    ap.add_argument("--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    guesses = load_guess_vocab(args.csv).words()
    if args.solutions:
        targets = load_solution_targets(args.csv).words()
    else:
        common = DEFAULT_COMMON if args.common is None else args.common
        targets = load_common_targets(args.csv, common).words()
    logger.info("%d guesses, %d targets", len(guesses), len(targets))

    play(guesses, targets, hard=args.hard, top=args.top, workers=args.workers)


if __name__ == "__main__":
    main()
