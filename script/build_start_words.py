"""
Build a root-word list from wordfreq's most frequent English words.

What it does:
- Takes the top-N words for a language from wordfreq.
- Keeps plain lowercase a-z tokens of exactly --length letters.
- Optionally drops words below a Zipf frequency floor (too obscure to be fun).
- De-duplicates while preserving frequency order, and writes one per line.

Usage:
    python -m script.build_start_words --out wordscramble/datasets/data/start.txt
    # alphabetical, 7-letter roots:
    python -m script.build_start_words --length 7 --sort --out start_7.txt
"""

import argparse

from wordfreq import top_n_list, zipf_frequency

from wordscramble.datasets import write_words


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def build_start_words(length: int, *, language: str = "en", n_top: int = 50000,
                      min_zipf: float = 0.0) -> list[str]:
    words = []
    for w in top_n_list(language, n_top):
        w = w.strip()
        if len(w) != length or not (w.isascii() and w.isalpha()) or w != w.lower():
            continue
        if min_zipf and zipf_frequency(w, language) < min_zipf:
            continue
        words.append(w)
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Build a start word list from wordfreq")
    ap.add_argument("--length", type=int, default=8, help="root word length")
    ap.add_argument("--language", default="en")
    ap.add_argument("--top", type=int, default=50000, help="how many frequent words to scan")
    ap.add_argument("--min-zipf", type=float, default=0.0,
                    help="drop words rarer than this Zipf frequency")
    ap.add_argument("--out", default="wordscramble/datasets/data/start.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of "
                                                        "keeping frequency order")
    args = ap.parse_args()

    words = build_start_words(args.length, language=args.language, n_top=args.top,
                              min_zipf=args.min_zipf)
    if args.sort:
        words = sorted(words)

    write_words(words, args.out)
    print(f"Wrote {len(words)} start words -> {args.out}")


if __name__ == "__main__":
    main()
