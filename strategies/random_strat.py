"""Random strategy: pick uniformly at random from the words the judge still allows."""

from __future__ import annotations

import random

from strategy import Strategy, GameConfig
from absurdle_env import filter_candidates


class RandomStrategy(Strategy):
    """Guess a random word from the set of remaining candidates."""

    @property
    def name(self) -> str:
        return "Random"

    def begin_game(self, config: GameConfig) -> None:
        self._candidates = sorted(config.vocabulary)
        self._rng = random.Random(config.seed)

    def guess(self, history) -> str:
        # Re-filter from scratch (simple & correct)
        candidates = self._candidates
        for g, pat in history:
            candidates = filter_candidates(candidates, g, pat)
        if not candidates:
            # Fallback: the judge never empties the candidate set
            return self._candidates[0]
        return self._rng.choice(candidates)
