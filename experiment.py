#!/usr/bin/env python3
"""Run a single guesser against the Absurdle judge with detailed per-game output."""

from __future__ import annotations

import argparse
import json
import math
import sys
from pathlib import Path

from absurdle_env import AbsurdleEnv
from lexicon import load_lexicon
from play import render_pattern
from strategy import Strategy, GameConfig
from strategies import find_strategy

RESULTS_DIR = Path(__file__).resolve().parent / "results"


def _entropy_bits(n: int) -> float:
    return math.log2(n) if n > 1 else 0.0


def run_experiment(
    strat: Strategy,
    vocabulary: list[str],
    word_length: int = 5,
    num_games: int = 10,
    seed: int = 42,
    max_guesses: int | None = None,
    allow_non_words: bool = True,
    verbose: bool = False,
) -> list[dict]:
    """Play *num_games* games; game *i* uses seed ``seed + i``.

    The judge is deterministic, so games only differ through the
    strategy's own random choices.
    """
    env = AbsurdleEnv(
        vocabulary=vocabulary,
        word_length=word_length,
        max_guesses=max_guesses,
        allow_non_words=allow_non_words,
    )

    logs: list[dict] = []

    for i in range(1, num_games + 1):
        env.reset()
        config = GameConfig(
            word_length=word_length,
            vocabulary=tuple(vocabulary),
            max_guesses=max_guesses,
            allow_non_words=allow_non_words,
            seed=seed + i,
        )
        strat.begin_game(config)
        game_log: list[dict] = []

        if verbose:
            print(f"\n--- Game {i}/{num_games} ---")

        while not env.game_over():
            word = strat.guess(env.history)
            pat = env.guess(word)
            remaining = len(env.candidates)
            ent = _entropy_bits(remaining)

            step = {
                "guess": word,
                "pattern": render_pattern(pat),
                "remaining": remaining,
                "entropy_bits": round(ent, 3),
            }
            game_log.append(step)

            if verbose:
                print(
                    f"  Guess {len(game_log)}: {word}  {render_pattern(pat, 'emoji')}  "
                    f"remaining={remaining}  H={ent:.2f} bits"
                )

        strat.end_game(env.is_solved(), len(env.history))
        result = {
            "game": i,
            "seed": seed + i,
            "answer": env.history[-1][0] if env.is_solved() else None,
            "solved": env.is_solved(),
            "num_guesses": len(env.history),
            "steps": game_log,
        }
        logs.append(result)

        if verbose:
            status = "SOLVED" if env.is_solved() else "FAILED"
            print(f"  -> {status} in {len(env.history)} guesses")

    return logs


def summarize(logs: list[dict]) -> dict:
    n = len(logs)
    if not n:
        return {"games": 0, "solved": 0, "solve_rate": 0, "mean_guesses": 0,
                "median_guesses": 0, "max_guesses": 0}
    solved = sum(1 for g in logs if g["solved"])
    guesses = sorted(g["num_guesses"] for g in logs)
    median = (
        guesses[n // 2]
        if n % 2 == 1
        else (guesses[n // 2 - 1] + guesses[n // 2]) / 2
    )
    return {
        "games": n,
        "solved": solved,
        "solve_rate": round(solved / n, 4),
        "mean_guesses": round(sum(guesses) / n, 3),
        "median_guesses": median,
        "max_guesses": guesses[-1],
    }


def print_experiment_summary(logs: list[dict], strategy_name: str) -> None:
    s = summarize(logs)
    n = s["games"]
    print(f"\n=== {strategy_name} — {n} games ===")
    if not n:
        return
    print(f"  Solved: {s['solved']}/{n} ({100 * s['solve_rate']:.1f}%)")
    print(f"  Guesses — mean: {s['mean_guesses']:.2f}, "
          f"median: {s['median_guesses']:.1f}, max: {s['max_guesses']}")


def plot_distribution(logs: list[dict], strategy_name: str, path: Path | None = None) -> None:
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError:
        print("[warn] matplotlib not installed — skipping plot", file=sys.stderr)
        return

    guesses = [g["num_guesses"] for g in logs]
    mx = max(guesses) if guesses else 1
    bins = list(range(1, mx + 2))

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.hist(guesses, bins=bins, edgecolor="black", align="left")
    ax.set_title(f"{strategy_name} vs Absurdle — guess distribution")
    ax.set_xlabel("Guesses")
    ax.set_ylabel("Count")
    fig.tight_layout()

    dest = path or RESULTS_DIR / f"experiment_{strategy_name.lower()}.png"
    dest.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(dest, dpi=150)
    plt.close(fig)
    print(f"Plot saved to {dest}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Single-guesser Absurdle experiment")
    parser.add_argument("--strategy", type=str, required=True, help="Strategy name")
    parser.add_argument("--words", type=str, default=None, help="Path to word list")
    parser.add_argument("--length", type=int, default=5, help="Word length")
    parser.add_argument("--max-guesses", type=int, default=None,
                        help="Optional guess cap per game (default: unlimited)")
    parser.add_argument("--num-games", type=int, default=10, help="Number of games")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--vocab-only", action="store_true",
                        help="Restrict guesses to vocabulary words only")
    parser.add_argument("--verbose", action="store_true", help="Print per-game details")
    parser.add_argument("--plot", type=str, default=None, help="Save plot to this path")
    parser.add_argument("--no-plot", action="store_true", help="Skip the histogram")
    parser.add_argument("--json", type=str, default=None, help="Save results as JSON")
    args = parser.parse_args(argv)

    try:
        cls = find_strategy(args.strategy)
    except KeyError as exc:
        print(exc.args[0], file=sys.stderr)
        sys.exit(1)

    lex = load_lexicon(path=args.words, word_length=args.length)
    print(f"Vocabulary: {len(lex.words)} words of length {args.length}")

    strat = cls()
    print(f"Strategy: {strat.name}")

    logs = run_experiment(
        strat=strat,
        vocabulary=lex.words,
        word_length=args.length,
        num_games=args.num_games,
        seed=args.seed,
        max_guesses=args.max_guesses,
        allow_non_words=not args.vocab_only,
        verbose=args.verbose,
    )

    print_experiment_summary(logs, strat.name)

    if not args.no_plot:
        plot_path = Path(args.plot) if args.plot else RESULTS_DIR / f"experiment_{strat.name.lower()}.png"
        plot_distribution(logs, strat.name, plot_path)

    json_path = Path(args.json) if args.json else RESULTS_DIR / f"experiment_{strat.name.lower()}.json"
    json_path.parent.mkdir(parents=True, exist_ok=True)
    output = {
        "strategy": strat.name,
        "config": {
            "word_length": args.length,
            "max_guesses": args.max_guesses,
            "num_games": args.num_games,
            "seed": args.seed,
        },
        "summary": summarize(logs),
        "games": logs,
    }
    json_path.write_text(json.dumps(output, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"JSON saved to {json_path}")


if __name__ == "__main__":
    main()
