from __future__ import annotations

from typing import List, Sequence

import pandas as pd

from guesser.config import WORD_LENGTH


class WordVocab:
    """
    An ordered, immutable list of distinct words of a single length.

    Guess lists and target lists are both handed to the estimator as
    WordVocab contents; nothing in the core holds word lists globally.
    """

    def __init__(self, words: Sequence[str], *, word_len: int = WORD_LENGTH) -> None:
        if isinstance(words, str) or not isinstance(words, (list, tuple)):
            raise TypeError("`words` must be a list of strings")
        if not words:
            raise ValueError("no words provided")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")
        bad = [w for w in words if len(w) != word_len]
        if bad:
            raise ValueError(f"words must be exactly length {word_len}, got '{bad[0]}'")

        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")

        self._words: tuple = tuple(words)

    # ---------- Construction helpers ----------

    @classmethod
    def from_csv(
        cls,
        path: str,
        column: str = "word",
        *,
        word_len: int = WORD_LENGTH,
        lowercase: bool = True,
        dedupe: bool = True,
        alpha_only: bool = True,
    ) -> "WordVocab":
        """
        Load words from a CSV and build a WordVocab.

        Parameters
        ----------
        path : str
            Path to CSV file.
        column : str
            Column name containing words.
        word_len : int, default=WORD_LENGTH
            Required word length; other rows are dropped.
        lowercase : bool, default=True
            If True, lowercase words before validation.
        dedupe : bool, default=True
            If True, keep the first occurrence and drop later duplicates.
        alpha_only : bool, default=True
            If True, keep only alphabetic words (str.isalpha()).

        Raises
        ------
        FileNotFoundError, KeyError, ValueError
        """
        df = pd.read_csv(path, keep_default_na=False)
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")
        return cls(
            clean_words(
                df[column].tolist(),
                word_len=word_len,
                lowercase=lowercase,
                dedupe=dedupe,
                alpha_only=alpha_only,
            ),
            word_len=word_len,
        )

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        return len(self._words)

    def words(self) -> List[str]:
        """Return a copy of the word list."""
        return list(self._words)


def clean_words(
    raw: Sequence[object],
    *,
    word_len: int = WORD_LENGTH,
    lowercase: bool = True,
    dedupe: bool = True,
    alpha_only: bool = True,
) -> List[str]:
    """Normalize raw cell values into a list of usable words, keeping order."""
    clean: List[str] = []
    seen = set()
    for val in raw:
        w = val if isinstance(val, str) else ("" if val is None else str(val))
        w = w.strip()
        if lowercase:
            w = w.lower()

        if len(w) != word_len:
            continue
        if alpha_only and not (w.isascii() and w.isalpha()):
            continue

        if dedupe:
            if w in seen:
                continue
            seen.add(w)

        clean.append(w)

    if not clean:
        raise ValueError("no valid words after filtering")
    return clean
