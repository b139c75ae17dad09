# apps/cli/run.py
"""
CLI entry point for batch autoplay runs.

This script:
  1) Validates the start word list (prints counts + SHA).
  2) Builds a controller with the requested spell checker.
  3) Runs the autoplay bot for N games with a live progress indicator and
     writes:
       - CSV:  one row per submission (outcome, rejection code, tally)
       - JSON: manifest with config, start list report, summary, git commit
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordscramble.datasets import DEFAULT_START_WORDS, DictionarySource
from wordscramble.datasets import validate_start_words, pretty_summary
from wordscramble.game import GameConfigError, GameController
from wordscramble.harness import autoplay, summarize
from wordscramble.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordscramble.spelling import create_checker, get_checker_ids
from wordscramble.spelling.wordfreq_checker import DEFAULT_MIN_ZIPF, top_words


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordscramble — autoplay batch runs")
    ap.add_argument("--start-words", default=str(DEFAULT_START_WORDS),
                    help="root word list (one per line)")
    ap.add_argument("--checker", default="wordfreq", choices=get_checker_ids(),
                    help="spell checker id")
    ap.add_argument("--wordlist", help="word list for --checker wordlist")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help=f"wordfreq Zipf floor for real words (default {DEFAULT_MIN_ZIPF})")
    ap.add_argument("--vocab-size", type=int, default=50000,
                    help="how many frequent English words the bot draws from")
    ap.add_argument("--games", type=int, default=20, help="number of games to play")
    ap.add_argument("--rounds", type=int, default=3, help="root words per game")
    ap.add_argument("--words-per-round", type=int, default=10,
                    help="max submissions per root word")
    ap.add_argument("--redraw-on-accept", action="store_true",
                    help="draw a new root word after every accepted word")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    return ap


def main():
    args = build_parser().parse_args()

    # 1) Validate the start list and print a one-liner summary
    rep = validate_start_words(args.start_words)
    print(pretty_summary(rep))

    # 2) Collaborators
    try:
        if args.checker == "wordlist":
            if not args.wordlist:
                sys.exit("--wordlist is required with --checker wordlist")
            checker = create_checker("wordlist", path=args.wordlist)
        else:
            checker = create_checker(args.checker, min_zipf=args.min_zipf)
        source = DictionarySource(args.start_words)
        source.word_pool()  # fail fast before the batch
    except GameConfigError as e:
        sys.exit(f"fatal: {e}")

    vocabulary = top_words(n_top=args.vocab_size)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    games = range(1, args.games + 1)
    iterator = tqdm(games, ncols=80, desc="Playing", unit="game") if mode == "bar" else games

    records = []
    start = time.time()
    last_print = 0.0

    # 4) Play
    for idx in iterator:
        per_seed = args.seed + idx * 1013904223  # LCG-ish stride to avoid collisions
        game = GameController(source, checker, redraw_on_accept=args.redraw_on_accept,
                              seed=per_seed)
        try:
            rs = autoplay(game, vocabulary, rounds=args.rounds,
                          words_per_round=args.words_per_round, seed=per_seed)
        except GameConfigError as e:
            sys.exit(f"fatal: {e}")
        for r in rs:
            r["game"] = idx
        records.extend(rs)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == args.games):
                elapsed = now - start
                pct = 100.0 * idx / max(1, args.games)
                sys.stderr.write(f"\r[{idx}/{args.games}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    summary = summarize(records)
    write_csv(records, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "start_words": rep,
        "num_games": args.games,
        "summary": summary,
    }, str(manifest_path))

    print(f"accepted {summary['accepted']}/{summary['attempts']} attempts")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
