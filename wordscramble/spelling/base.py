from __future__ import annotations
from typing import Dict, Type

# ---- Global spell checker registry ----
REGISTRY: Dict[str, Type["BaseSpellChecker"]] = {}


def register(cls: Type["BaseSpellChecker"]) -> Type["BaseSpellChecker"]:
    """
    Decorator: @register on a checker class adds it to REGISTRY by its `id`.
    """
    cid = getattr(cls, "id", None)
    if not cid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if cid in REGISTRY:
        raise ValueError(f"Duplicate spell checker id: {cid}")
    REGISTRY[cid] = cls
    return cls


# ---- Base class that checkers inherit ----
class BaseSpellChecker:
    id = "base"
    name = "Base"

    def is_real_word(self, word: str, language: str) -> bool:
        """
        True if `word` is a correctly spelled word in `language`.
        Raise SpellCheckerUnavailableError if the language can't be answered.
        """
        raise NotImplementedError("Override in subclass")
