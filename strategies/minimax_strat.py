"""Minimax strategy: shrink the group the judge is going to keep.

The judge always keeps the largest group of the partition, so the best a
guesser can do is pick the word whose largest group is smallest.
"""

from __future__ import annotations

import random

from strategy import Strategy, GameConfig
from absurdle_env import filter_candidates, judge

# Performance caps
_MAX_GUESS_POOL = 200      # max guesses to evaluate
_MAX_EVAL_CANDIDATES = 500  # max candidates to partition against


class MinimaxStrategy(Strategy):
    """Select the candidate that minimises the judge's surviving group.

    Ties go to the alphabetically first word so runs are reproducible for a
    given seed.
    """

    @property
    def name(self) -> str:
        return "Minimax"

    def begin_game(self, config: GameConfig) -> None:
        self._vocab = sorted(config.vocabulary)
        self._rng = random.Random(config.seed)

    def guess(self, history) -> str:
        candidates = self._vocab
        for g, pat in history:
            candidates = filter_candidates(candidates, g, pat)

        if not candidates:
            return self._vocab[0]
        if len(candidates) <= 2:
            return candidates[0]

        # Build guess pool (capped for performance)
        if len(candidates) <= _MAX_GUESS_POOL:
            guess_pool = candidates
        else:
            guess_pool = sorted(self._rng.sample(candidates, _MAX_GUESS_POOL))

        # Subsample candidates if too many
        if len(candidates) <= _MAX_EVAL_CANDIDATES:
            eval_candidates = candidates
        else:
            eval_candidates = self._rng.sample(candidates, _MAX_EVAL_CANDIDATES)

        best_guess = guess_pool[0]
        best_size = len(eval_candidates) + 1
        for g in guess_pool:
            _, kept = judge(eval_candidates, g)
            if len(kept) < best_size:
                best_size = len(kept)
                best_guess = g

        return best_guess
