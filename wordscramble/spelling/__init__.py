from __future__ import annotations
from typing import List
from .base import BaseSpellChecker, REGISTRY, register

from . import wordfreq_checker  # noqa: F401
from . import wordlist_checker  # noqa: F401


def create_checker(checker_id: str, **kwargs) -> BaseSpellChecker:
    """
    Factory: instantiate a registered spell checker by id.
    Keyword arguments go to the checker's constructor.
    """
    try:
        cls = REGISTRY[checker_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown spell checker id: {checker_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_checker_ids() -> List[str]:
    """
    Return all registered checker ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
