"""First-candidate strategy: always guess the alphabetically first remaining word."""

from __future__ import annotations

from strategy import Strategy, GameConfig
from absurdle_env import filter_candidates


class FirstCandidateStrategy(Strategy):
    """Deterministic baseline: the first consistent word in sorted order."""

    @property
    def name(self) -> str:
        return "FirstCandidate"

    def begin_game(self, config: GameConfig) -> None:
        self._candidates = sorted(config.vocabulary)

    def guess(self, history) -> str:
        candidates = self._candidates
        for g, pat in history:
            candidates = filter_candidates(candidates, g, pat)
        if not candidates:
            return self._candidates[0]
        return candidates[0]
