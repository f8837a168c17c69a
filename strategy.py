"""Abstract base class for guessers that play against the Absurdle judge."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from absurdle_env import Pattern


@dataclass(frozen=True)
class GameConfig:
    """All information a strategy receives at the start of each game.

    Attributes
    ----------
    word_length : int
        Number of letters in each word.
    vocabulary : tuple[str, ...]
        The judge's initial candidate set (immutable).  Whatever the judge
        ends up accepting is always drawn from this set.
    max_guesses : int or None
        Guess cap for the game, or None when the game is unlimited.
    allow_non_words : bool
        If True, guesses are **not** restricted to the vocabulary.
    seed : int or None
        Seed for strategies that make random choices.
    """

    word_length: int
    vocabulary: tuple[str, ...]
    max_guesses: int | None = None
    allow_non_words: bool = True
    seed: int | None = None


class Strategy(ABC):
    """Interface that every guesser must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable strategy name (used in reports)."""
        ...

    def begin_game(self, config: GameConfig) -> None:
        """Called at the start of each game.

        The default implementation does nothing.
        """

    @abstractmethod
    def guess(self, history: list[tuple[str, Pattern]]) -> str:
        """Return the next guess given the history of (guess, pattern) pairs."""
        ...

    def end_game(self, solved: bool, num_guesses: int) -> None:
        """Called at the end of each game.

        The default implementation does nothing.
        """
