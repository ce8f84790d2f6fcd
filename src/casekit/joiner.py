"""Convention-specific joiners for word sequences."""

from __future__ import annotations

from typing import Callable, Sequence

from .conventions import CAMEL, DOT, KEBAB, normalize_convention

__all__ = ["join", "capitalize_word"]


def capitalize_word(word: str) -> str:
    """Uppercase the first character and lowercase the rest."""
    return word[:1].upper() + word[1:].lower()


def _join_camel(words: Sequence[str]) -> str:
    if not words:
        return ""
    first, rest = words[0].lower(), [capitalize_word(w) for w in words[1:]]
    return "".join([first, *rest])


_JOINERS: dict[str, Callable[[Sequence[str]], str]] = {
    KEBAB: "-".join,
    DOT: ".".join,
    CAMEL: _join_camel,
}


def join(words: Sequence[str], convention: str) -> str:
    """Join ``words`` following ``convention`` (any accepted spelling).

    An empty sequence yields ``""`` for every convention.
    """
    return _JOINERS[normalize_convention(convention)](words)
