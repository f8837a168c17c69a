"""Word-list loading utilities (self-contained).

Supports two formats:
  - Plain text: whitespace-separated words (usually one per line)
  - CSV with a ``word`` column (extra columns such as ``count`` are ignored)

The loaded list becomes the judge's initial candidate set: every word of
the requested length.
"""

from __future__ import annotations

import csv
import re
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from absurdle_env import InvalidConfiguration


_DIR = Path(__file__).resolve().parent
DATA_DIR = _DIR / "data"


def _strip_accents(text: str) -> str:
    nfkd = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in nfkd if unicodedata.category(ch) != "Mn")


@dataclass
class Lexicon:
    """A pruned word list for one word length."""
    words: list[str]
    word_length: int
    source: Path


# ------------------------------------------------------------------
# Raw tokens and pruning
# ------------------------------------------------------------------

def load_file(path: str | Path) -> list[str]:
    """Return every whitespace-separated token in *path*, in file order."""
    return Path(path).read_text(encoding="utf-8").split()


def prune_dictionary(contents: Iterable[str], word_length: int) -> set[str]:
    """Keep the words of *contents* that are exactly *word_length* long.

    Raises
    ------
    InvalidConfiguration
        If *word_length* is less than 1.
    """
    if word_length < 1:
        raise InvalidConfiguration(
            f"word_length must be at least 1, got {word_length}"
        )
    return {w for w in contents if len(w) == word_length}


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------

def _normalise(tokens: Iterable[str], word_length: int) -> list[str]:
    pattern = re.compile(rf"^[a-z]{{{word_length}}}$")
    cleaned = (_strip_accents(t.strip().lower()) for t in tokens)
    return sorted(w for w in prune_dictionary(cleaned, word_length) if pattern.match(w))


def _read_csv_words(path: Path) -> list[str]:
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None or "word" not in reader.fieldnames:
            raise ValueError(f"{path} has no 'word' column")
        return [row["word"] for row in reader if row["word"]]


def default_path(word_length: int) -> Path:
    return DATA_DIR / f"words_{word_length}.txt"


def load_lexicon(
    path: str | Path | None = None,
    word_length: int = 5,
) -> Lexicon:
    """Load a word list and prune it to *word_length*.

    Parameters
    ----------
    path : str, Path or None
        Path to a ``.txt`` (whitespace-separated words) or ``.csv``
        (``word`` column).  None falls back to ``data/words_{word_length}.txt``.
    word_length : int
        Only keep words of this exact length.

    Returns
    -------
    Lexicon
    """
    if word_length < 1:
        raise InvalidConfiguration(
            f"word_length must be at least 1, got {word_length}"
        )

    src = Path(path) if path is not None else default_path(word_length)
    if not src.exists():
        if path is None:
            raise FileNotFoundError(
                f"No word list found for {word_length}-letter words. "
                f"Looked for:\n  {src}\n"
                f"Pass one explicitly with --words"
            )
        raise FileNotFoundError(f"Word list not found: {src}")

    if src.suffix == ".csv":
        tokens = _read_csv_words(src)
    else:
        tokens = load_file(src)

    words = _normalise(tokens, word_length)
    if not words:
        raise InvalidConfiguration(f"No {word_length}-letter words found in {src}")

    return Lexicon(words=words, word_length=word_length, source=src)
