"""
Word list loading.

One CSV describes everything:

    word       every word the game accepts as a guess
    frequency  optional corpus count (higher = more common)
    day        optional; non-empty for official puzzle solutions
"""

import logging

import pandas as pd

from guesser.config import DEFAULT_COMMON
from guesser.vocab import WordVocab, clean_words

logger = logging.getLogger(__name__)


def _read_word_frame(csv_path: str) -> pd.DataFrame:
    df = pd.read_csv(csv_path, dtype={"word": str})
    if "word" not in df.columns:
        raise KeyError(f"column 'word' not found in {csv_path}")
    df = df[df["word"].notna()].copy()
    df["word"] = df["word"].str.strip().str.lower()
    df = df.drop_duplicates(subset="word", keep="first")
    return df


def _ranked_by_frequency(df: pd.DataFrame) -> pd.DataFrame:
    if "frequency" not in df.columns:
        return df
    freq = pd.to_numeric(df["frequency"], errors="coerce").fillna(0)
    # stable, so equally common words stay in file order
    order = freq.sort_values(ascending=False, kind="mergesort").index
    return df.loc[order]


def load_guess_vocab(csv_path: str) -> WordVocab:
    """Every admissible guess in the CSV, in file order."""
    vocab = WordVocab.from_csv(csv_path, column="word")
    logger.debug("loaded %d guess words from %s", len(vocab), csv_path)
    return vocab


def load_common_targets(csv_path: str, common: int = DEFAULT_COMMON) -> WordVocab:
    """
    The `common` most frequent words that also have a frequency entry.

    Words without a frequency are too rare to be picked as a puzzle answer,
    though they stay in the guess list.
    """
    if common <= 0:
        raise ValueError("common must be a positive integer")
    df = _read_word_frame(csv_path)
    if "frequency" not in df.columns:
        raise KeyError(f"column 'frequency' not found in {csv_path}")
    freq = pd.to_numeric(df["frequency"], errors="coerce")
    df = _ranked_by_frequency(df[freq.notna() & (freq > 0)])
    words = clean_words(df["word"].tolist())[:common]
    logger.debug("loaded %d common targets from %s", len(words), csv_path)
    return WordVocab(words)


def load_solution_targets(csv_path: str) -> WordVocab:
    """
    Only the official answers (rows where 'day' is not null), most frequent first.
    """
    df = _read_word_frame(csv_path)
    if "day" not in df.columns:
        raise KeyError(f"column 'day' not found in {csv_path}")
    df = _ranked_by_frequency(df[df["day"].notna()])
    words = clean_words(df["word"].tolist())
    logger.debug("loaded %d solution targets from %s", len(words), csv_path)
    return WordVocab(words)
