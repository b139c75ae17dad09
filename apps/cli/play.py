# apps/cli/play.py
"""
Interactive terminal front-end for wordscramble.

Type a word and press Enter to submit it. Commands:
  :new    draw a new root word (accepted words and tally are kept)
  :start  start a new game (everything is cleared)
  :hint   show a few words still available from the root
  :quit   leave

Usage:
    python -m apps.cli.play --checker wordfreq
    python -m apps.cli.play --checker wordlist --wordlist my_words.txt
"""

from __future__ import annotations

import argparse
import sys

from wordscramble.datasets import DEFAULT_START_WORDS, DictionarySource
from wordscramble.game import GameConfigError, GameController, GameSnapshot
from wordscramble.spelling import create_checker, get_checker_ids
from wordscramble.spelling.wordfreq_checker import DEFAULT_MIN_ZIPF, top_words
from wordscramble.engine.validation import Rejected

HINT_COUNT = 5


def _render(snap: GameSnapshot) -> None:
    print()
    print(f"== {snap.root_word} ==")
    for w in snap.accepted_words:
        print(f"  ({len(w)}) {w}")
    print(f"Words: {snap.word_count}    Letters: {snap.letter_count}")


def _build_checker(args):
    if args.checker == "wordlist":
        if not args.wordlist:
            sys.exit("--wordlist is required with --checker wordlist")
        return create_checker("wordlist", path=args.wordlist)
    return create_checker(args.checker, min_zipf=args.min_zipf)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordscramble — make words from a root word")
    ap.add_argument("--start-words", default=str(DEFAULT_START_WORDS),
                    help="root word list (one per line)")
    ap.add_argument("--checker", default="wordfreq", choices=get_checker_ids(),
                    help="spell checker id")
    ap.add_argument("--wordlist", help="word list for --checker wordlist")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help=f"wordfreq Zipf floor for real words (default {DEFAULT_MIN_ZIPF}); "
                         "higher rejects rarer words")
    ap.add_argument("--redraw-on-accept", action="store_true",
                    help="draw a new root word after every accepted word")
    ap.add_argument("--vocab-size", type=int, default=50000,
                    help="how many frequent English words :hint draws from")
    ap.add_argument("--seed", type=int, help="RNG seed for root word draws")
    return ap


def main():
    args = build_parser().parse_args()

    try:
        checker = _build_checker(args)
        source = DictionarySource(args.start_words)
        game = GameController(source, checker, redraw_on_accept=args.redraw_on_accept,
                              seed=args.seed)
        game.new_game()
    except GameConfigError as e:
        sys.exit(f"fatal: {e}")

    vocabulary = top_words(n_top=args.vocab_size)
    _render(game.snapshot())

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        cmd = line.strip()
        try:
            if cmd == ":quit":
                break
            elif cmd == ":new":
                game.start_round()
            elif cmd == ":start":
                game.new_game()
            elif cmd == ":hint":
                hints = game.hints(vocabulary, limit=HINT_COUNT)
                print("hints: " + (", ".join(hints) if hints else "(none left)"))
                continue
            else:
                game.update_input(line)
                outcome = game.submit()
                if isinstance(outcome, Rejected):
                    print(f"[{outcome.title}] {outcome.message}")
                    continue
        except GameConfigError as e:
            sys.exit(f"fatal: {e}")

        _render(game.snapshot())


if __name__ == "__main__":
    main()
