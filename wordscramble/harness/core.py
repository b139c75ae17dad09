"""
Session harness primitives.

- replay:   feed a scripted list of attempts to a controller, one record each.
- autoplay: a simple bot that draws roots and submits random spellable words
            from a vocabulary, for smoke runs and batch statistics.

These functions are UI-agnostic so they can be reused by a CLI app, a
notebook, or tests without changes.
"""

from __future__ import annotations

import random
import time
from typing import Dict, Iterable, List

from wordscramble.engine.validation import Outcome, Rejected
from wordscramble.game import GameController


def _record(controller: GameController, *, round_no: int, root: str,
            attempt: str, outcome: Outcome, time_ms: float) -> Dict:
    """Flatten one submission into a CSV-friendly dict."""
    snap = controller.snapshot()
    rejected = isinstance(outcome, Rejected)
    return {
        "round": round_no,
        "root": root,
        "attempt": attempt,
        "accepted": outcome.accepted,
        "word": "" if rejected else outcome.word,
        "code": outcome.code.value if rejected else "",
        "title": outcome.title if rejected else "",
        "message": outcome.message if rejected else "",
        "word_count": snap.word_count,
        "letter_count": snap.letter_count,
        "time_ms": time_ms,
    }


def replay(controller: GameController, attempts: Iterable[str], *, round_no: int = 1) -> List[Dict]:
    """
    Submit each attempt in order against the controller's current state.

    The root reported per record is the one the attempt was checked against
    (with redraw_on_accept it may change between records).
    """
    out: List[Dict] = []
    for attempt in attempts:
        root = controller.snapshot().root_word
        t0 = time.perf_counter_ns()
        outcome = controller.submit(attempt)
        dt = (time.perf_counter_ns() - t0) / 1_000_000.0
        out.append(_record(controller, round_no=round_no, root=root,
                           attempt=attempt, outcome=outcome, time_ms=dt))
    return out


def autoplay(
        controller: GameController,
        vocabulary: List[str],
        *,
        rounds: int,
        words_per_round: int,
        seed: int | None = None,
) -> List[Dict]:
    """
    Play `rounds` rounds of one game: the first round starts a new game, the
    following ones only draw a new root (accepted words carry over).

    Each round the bot submits up to `words_per_round` words picked at random
    from the controller's hints; a round ends early once no hint is left.
    Hints skip the spell checker, so some submissions may be rejected with
    NotARealWord; those words are not retried in the same round.
    """
    if rounds < 1:
        raise ValueError(f"rounds must be >= 1; got {rounds}")

    rng = random.Random(seed)
    out: List[Dict] = []

    controller.new_game()
    for round_no in range(1, rounds + 1):
        if round_no > 1:
            controller.start_round()

        tried = set()
        for _ in range(words_per_round):
            pool = [w for w in controller.hints(vocabulary) if w not in tried]
            if not pool:
                break
            word = pool[rng.randrange(len(pool))]
            tried.add(word)
            out.extend(replay(controller, [word], round_no=round_no))

    return out


def summarize(records: List[Dict]) -> Dict:
    """
    Aggregate a list of records (possibly spanning several games):
    attempts, accepted words, accepted letters, and rejections by code.
    """
    by_code: Dict[str, int] = {}
    accepted = 0
    letters = 0
    for r in records:
        if r["accepted"]:
            accepted += 1
            letters += len(r["word"])
        else:
            by_code[r["code"]] = by_code.get(r["code"], 0) + 1

    return {
        "attempts": len(records),
        "accepted": accepted,
        "letters": letters,
        "rejected_by_code": by_code,
    }
