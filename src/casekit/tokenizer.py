# casekit/tokenizer.py
"""
Split arbitrary text into lowercase words.

Boundaries are:

- a lowercase ASCII letter immediately followed by an uppercase one
  (``helloWorld`` -> ``hello`` | ``World``)
- any run of whitespace, ``_`` or ``-``

Empty fragments are dropped, so leading, trailing and repeated delimiters
never produce empty words.
"""

import logging
import re

from .exceptions import InvalidInputTypeError

__all__ = ["tokenize", "remove_special_chars"]

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")
_DELIMITER_RE = re.compile(r"[\s_\-]+")
_SPECIAL_CHARS_RE = re.compile(r"[^a-zA-Z0-9\s\-_]")


def remove_special_chars(value: str) -> str:
    """Trim ``value`` and drop everything but ASCII letters, digits, whitespace, ``-`` and ``_``."""
    return _SPECIAL_CHARS_RE.sub("", value.strip())


def tokenize(value: str, *, strip_special_chars: bool = False) -> list[str]:
    """Return the lowercase, non-empty words of ``value``.

    Raises:
        InvalidInputTypeError: if ``value`` is not a ``str``.
    """
    if not isinstance(value, str):
        raise InvalidInputTypeError(value)

    if strip_special_chars:
        value = remove_special_chars(value)

    spaced = _CAMEL_BOUNDARY_RE.sub(r"\1 \2", value)
    words = [part.lower() for part in _DELIMITER_RE.split(spaced) if part]
    logger.debug("Tokenized %r into %r", value, words)
    return words
