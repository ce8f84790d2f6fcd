"""Convention constants and normalization helpers."""

from __future__ import annotations

import re

from .exceptions import InvalidInputTypeError, UnknownConventionError

__all__ = [
    "KEBAB",
    "CAMEL",
    "DOT",
    "SUPPORTED_CONVENTIONS",
    "normalize_convention",
]

KEBAB = "kebab"
CAMEL = "camel"
DOT = "dot"

SUPPORTED_CONVENTIONS: tuple[str, ...] = (KEBAB, CAMEL, DOT)

_SEPARATORS_RE = re.compile(r"[._\s\-]+")
_CASE_SUFFIX_RE = re.compile(r"-?case$")


def _normalize(value: str) -> str:
    normalized = _SEPARATORS_RE.sub("-", value.strip()).strip("-").lower()
    return _CASE_SUFFIX_RE.sub("", normalized)


def normalize_convention(value: str) -> str:
    """Resolve a convention spelling to its canonical name.

    Examples:
        "kebab-case" -> "kebab"
        "camelCase" -> "camel"
        "dot.case" -> "dot"
        " DOT " -> "dot"
    """
    if not isinstance(value, str):
        raise InvalidInputTypeError(value, what="convention")

    normalized = _normalize(value)
    if normalized not in SUPPORTED_CONVENTIONS:
        raise UnknownConventionError(value, SUPPORTED_CONVENTIONS)
    return normalized
