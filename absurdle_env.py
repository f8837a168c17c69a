"""Absurdle environment: an adversarial Wordle judge for any word length.

The judge never commits to a secret.  After every guess it groups the
surviving candidates by the feedback each one would produce and keeps the
largest group, so each answer reveals as little as possible while never
contradicting an earlier one.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum, IntEnum
from typing import Iterable


class Symbol(IntEnum):
    """Feedback for one position.

    The integer values define the order used to break ties between groups
    of equal size: HIT < PRESENT < MISS.
    """

    HIT = 0      # correct letter, correct position
    PRESENT = 1  # letter occurs elsewhere (bounded by remaining count)
    MISS = 2     # letter absent, or already consumed by hits/presents


Pattern = tuple[Symbol, ...]


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


# ------------------------------------------------------------------
# Errors
# ------------------------------------------------------------------

class LengthMismatch(ValueError):
    """A guess was compared against a word of a different length."""


class InvalidState(ValueError):
    """The judge was asked to partition or select from an unusable set."""


class InvalidConfiguration(ValueError):
    """A game was configured with an impossible word length or vocabulary."""


# ------------------------------------------------------------------
# Pattern evaluator
# ------------------------------------------------------------------

def evaluate(word: str, guess: str) -> Pattern:
    """Return the pattern *guess* produces against *word*.

    Letters repeated in the guess are only marked as many times as they
    occur in the word: hits are consumed first, then presents left to right.
    """
    n = len(word)
    if len(guess) != n:
        raise LengthMismatch(
            f"guess length ({len(guess)}) != word length ({n})"
        )

    pat = [Symbol.MISS] * n
    remaining = Counter(word)

    # Pass 1 – hits
    for i, (w, g) in enumerate(zip(word, guess)):
        if g == w:
            pat[i] = Symbol.HIT
            remaining[g] -= 1

    # Pass 2 – presents
    for i, g in enumerate(guess):
        if pat[i] is Symbol.HIT:
            continue
        if remaining[g] > 0:
            pat[i] = Symbol.PRESENT
            remaining[g] -= 1

    return tuple(pat)


def is_winning_pattern(pattern: Pattern) -> bool:
    return all(s is Symbol.HIT for s in pattern)


def is_finished(patterns: list[Pattern]) -> bool:
    """True once the most recent pattern is all hits."""
    if not patterns:
        return False
    return is_winning_pattern(patterns[-1])


def filter_candidates(
    candidates: Iterable[str],
    guess: str,
    pattern: Pattern,
) -> list[str]:
    """Keep only candidates consistent with the observed *pattern*."""
    pattern = tuple(pattern)
    return [w for w in candidates if evaluate(w, guess) == pattern]


# ------------------------------------------------------------------
# Partition builder and adversarial selector
# ------------------------------------------------------------------

def partition(
    candidates: Iterable[str],
    guess: str,
) -> dict[Pattern, frozenset[str]]:
    """Group *candidates* by the pattern each would yield for *guess*.

    Raises
    ------
    InvalidState
        If *candidates* is empty or holds a word whose length differs
        from the guess.
    """
    groups: dict[Pattern, set[str]] = {}
    for word in candidates:
        if len(word) != len(guess):
            raise InvalidState(
                f"candidate {word!r} has length {len(word)}, "
                f"guess {guess!r} has length {len(guess)}"
            )
        groups.setdefault(evaluate(word, guess), set()).add(word)
    if not groups:
        raise InvalidState("cannot partition an empty candidate set")
    return {pat: frozenset(words) for pat, words in groups.items()}


def select_group(
    groups: dict[Pattern, frozenset[str]],
) -> tuple[Pattern, frozenset[str]]:
    """Pick the largest group; ties go to the smallest pattern."""
    if not groups:
        raise InvalidState("no groups to select from")
    return min(groups.items(), key=lambda item: (-len(item[1]), item[0]))


def judge(
    candidates: Iterable[str],
    guess: str,
) -> tuple[Pattern, frozenset[str]]:
    """One adversarial round: the emitted pattern and the surviving words.

    Pure: *candidates* is not modified.
    """
    return select_group(partition(candidates, guess))


# ------------------------------------------------------------------
# Round driver
# ------------------------------------------------------------------

class AbsurdleEnv:
    """A single Absurdle game.

    Parameters
    ----------
    vocabulary : iterable of str
        Initial candidate words (all must have the same length).
    word_length : int
        Expected word length (validated against vocabulary).
    max_guesses : int or None
        Optional cap on the number of guesses.  None (the default) means the
        game runs until the guesser forces an all-hit pattern.
    allow_non_words : bool
        If True, any string of the correct length is accepted as a guess.
    """

    def __init__(
        self,
        vocabulary: Iterable[str],
        word_length: int = 5,
        max_guesses: int | None = None,
        allow_non_words: bool = True,
    ) -> None:
        if word_length < 1:
            raise InvalidConfiguration(
                f"word_length must be at least 1, got {word_length}"
            )
        if max_guesses is not None and max_guesses < 1:
            raise InvalidConfiguration(
                f"max_guesses must be at least 1 or None, got {max_guesses}"
            )
        vocab = frozenset(w.lower() for w in vocabulary)
        if not vocab:
            raise InvalidConfiguration("vocabulary is empty")
        bad = sorted(w for w in vocab if len(w) != word_length)
        if bad:
            raise InvalidConfiguration(
                f"Words with wrong length (expected {word_length}): {bad[:5]}"
            )
        self._vocab = vocab
        self._word_length = word_length
        self._max_guesses = max_guesses
        self._allow_non_words = allow_non_words

        self._candidates: frozenset[str] = vocab
        self._history: list[tuple[str, Pattern]] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Start a new game with the full vocabulary."""
        self._candidates = self._vocab
        self._history = []

    def guess(self, word: str) -> Pattern:
        """Submit a guess and receive the judge's pattern.

        Raises
        ------
        RuntimeError
            If the game is over (solved or out of guesses).
        LengthMismatch
            If *word* has the wrong length.
        ValueError
            If *word* is not in the vocabulary (when ``allow_non_words``
            is False).
        """
        if self.game_over():
            raise RuntimeError("Game is already over")
        word = word.lower()
        if len(word) != self._word_length:
            raise LengthMismatch(
                f"Guess length ({len(word)}) != word_length ({self._word_length})"
            )
        if not self._allow_non_words and word not in self._vocab:
            raise ValueError(f"{word!r} is not in the vocabulary")

        pat, survivors = judge(self._candidates, word)
        self._history.append((word, pat))
        self._candidates = survivors
        return pat

    @property
    def state(self) -> GameState:
        if is_finished(self.patterns):
            return GameState.WON
        if self._max_guesses is not None and len(self._history) >= self._max_guesses:
            return GameState.LOST
        return GameState.IN_PROGRESS

    def is_solved(self) -> bool:
        return self.state is GameState.WON

    def game_over(self) -> bool:
        return self.state is not GameState.IN_PROGRESS

    def remaining_guesses(self) -> int | None:
        if self._max_guesses is None:
            return None
        return self._max_guesses - len(self._history)

    @property
    def history(self) -> list[tuple[str, Pattern]]:
        return list(self._history)

    @property
    def patterns(self) -> list[Pattern]:
        return [pat for _, pat in self._history]

    @property
    def candidates(self) -> frozenset[str]:
        return self._candidates

    @property
    def vocabulary(self) -> frozenset[str]:
        return self._vocab

    @property
    def word_length(self) -> int:
        return self._word_length

    @property
    def max_guesses(self) -> int | None:
        return self._max_guesses
