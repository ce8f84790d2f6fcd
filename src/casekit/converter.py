# casekit/converter.py
"""
Public conversion entry points.

``convert`` is ``join(tokenize(value), convention)``. The per-convention
helpers (``to_kebab_case`` and friends) are thin wrappers around it.

Error policy: non-string input raises :class:`InvalidInputTypeError` and an
unrecognized convention raises :class:`UnknownConventionError`. Nothing is
coerced and no call ever falls back to an empty result.
"""

from __future__ import annotations

import logging

from .conf import settings
from .conventions import CAMEL, DOT, KEBAB
from .joiner import join
from .options import CaseOptions
from .tokenizer import tokenize

__all__ = [
    "convert",
    "convert_options",
    "to_kebab_case",
    "to_camel_case",
    "to_dot_case",
]

logger = logging.getLogger(__name__)


def convert(value: str, convention: str | None = None, *, strip_special_chars: bool | None = None) -> str:
    """Convert ``value`` to ``convention``.

    Args:
        value: Text to convert.
        convention: ``"kebab"``, ``"camel"`` or ``"dot"`` (aliases such as
            ``"kebab-case"`` are accepted). Defaults to the
            ``DEFAULT_CONVENTION`` setting.
        strip_special_chars: Drop punctuation before splitting. Defaults to
            the ``STRIP_SPECIAL_CHARS`` setting.

    Examples:
        - ``convert("HelloWorld", "kebab")`` -> ``"hello-world"``
        - ``convert("SCREEN_NAME", "camel")`` -> ``"screenName"``
        - ``convert("helloWorld", "dot")`` -> ``"hello.world"``
    """
    if convention is None:
        convention = settings["DEFAULT_CONVENTION"]
    if strip_special_chars is None:
        strip_special_chars = settings.get_bool("STRIP_SPECIAL_CHARS")

    words = tokenize(value, strip_special_chars=strip_special_chars)
    result = join(words, convention)
    logger.debug("Converted %r to %s: %r", value, convention, result)
    return result


def convert_options(value: str, options: CaseOptions) -> str:
    """Convert ``value`` using an already validated :class:`CaseOptions`."""
    return convert(value, options.convention, strip_special_chars=options.strip_special_chars)


def to_kebab_case(value: str, *, strip_special_chars: bool | None = None) -> str:
    """``helloWorldTest`` -> ``hello-world-test``"""
    return convert(value, KEBAB, strip_special_chars=strip_special_chars)


def to_camel_case(value: str, *, strip_special_chars: bool | None = None) -> str:
    """``mobile-number`` -> ``mobileNumber``"""
    return convert(value, CAMEL, strip_special_chars=strip_special_chars)


def to_dot_case(value: str, *, strip_special_chars: bool | None = None) -> str:
    """``hello_world`` -> ``hello.world``"""
    return convert(value, DOT, strip_special_chars=strip_special_chars)
