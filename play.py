#!/usr/bin/env python3
"""Play Absurdle in the terminal.

Usage:
    python3 play.py                              # prompts for dictionary and length
    python3 play.py --words data/words_5.txt --length 5
    python3 play.py --length 4 --style emoji
    python3 play.py --length 5 --max-guesses 8   # optional cap (default: none)
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable

from absurdle_env import (
    AbsurdleEnv,
    LengthMismatch,
    Pattern,
    Symbol,
)
from lexicon import load_lexicon

GLYPHS: dict[str, dict[Symbol, str]] = {
    "ascii": {Symbol.HIT: "!", Symbol.PRESENT: "*", Symbol.MISS: "%"},
    "emoji": {Symbol.HIT: "\U0001f7e9", Symbol.PRESENT: "\U0001f7e8", Symbol.MISS: "⬛"},
}


def render_pattern(pattern: Pattern, style: str = "ascii") -> str:
    glyphs = GLYPHS[style]
    return "".join(glyphs[s] for s in pattern)


def score_line(env: AbsurdleEnv) -> str:
    limit = "∞" if env.max_guesses is None else str(env.max_guesses)
    return f"Absurdle {len(env.history)}/{limit}"


def play(
    env: AbsurdleEnv,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    style: str = "ascii",
) -> list[Pattern]:
    """Run the guess loop until the game is over or input runs out.

    Returns the emitted patterns in order.
    """
    while not env.game_over():
        try:
            raw = read("> ")
        except EOFError:
            write("")
            break
        word = raw.strip()
        if not word:
            continue
        try:
            pat = env.guess(word)
        except LengthMismatch:
            write(f"Guesses must be {env.word_length} letters long.")
            continue
        except ValueError as exc:
            write(f"Invalid guess: {exc}")
            continue
        write(f": {render_pattern(pat, style)}")
        write("")

    write(score_line(env))
    write("")
    for pat in env.patterns:
        write(render_pattern(pat, style))
    return env.patterns


def _prompt_config(args: argparse.Namespace) -> tuple[str | None, int]:
    words = args.words
    if words is None:
        answer = input("What dictionary would you like to use? (blank for built-in) ").strip()
        words = answer or None
    length = args.length
    if length is None:
        length = int(input("What length word would you like to guess? ").strip())
    return words, length


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Adversarial Wordle (Absurdle)")
    parser.add_argument("--words", type=str, default=None, help="Path to word list")
    parser.add_argument("--length", type=int, default=None, help="Word length")
    parser.add_argument("--max-guesses", type=int, default=None,
                        help="Optional guess cap (default: unlimited)")
    parser.add_argument("--style", choices=sorted(GLYPHS), default="ascii",
                        help="Pattern rendering (default: ascii, ! * %%)")
    parser.add_argument("--vocab-only", action="store_true",
                        help="Only accept guesses that are in the word list")
    parser.add_argument("--debug", action="store_true",
                        help="Print the pruned dictionary before playing")
    args = parser.parse_args(argv)

    print("Welcome to the game of Absurdle.")
    try:
        words, length = _prompt_config(args)
        lex = load_lexicon(path=words, word_length=length)
        env = AbsurdleEnv(
            vocabulary=lex.words,
            word_length=length,
            max_guesses=args.max_guesses,
            allow_non_words=not args.vocab_only,
        )
    except (FileNotFoundError, ValueError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        sys.exit(1)
    except EOFError:
        sys.exit(1)

    print(f"Vocabulary: {len(lex.words)} words of length {length} ({lex.source})")
    if args.debug:
        print(f"words: {lex.words}")

    play(env, read=input, style=args.style)


if __name__ == "__main__":
    main()
