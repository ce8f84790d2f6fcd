"""
Exception classes shared by every casekit module.

All errors derive from :class:`CaseKitError`. Each concrete error also
subclasses the matching builtin (``TypeError`` / ``ValueError``) so callers
that only know the builtin contract keep working.
"""
from .base import CaseKitError, InvalidInputTypeError, UnknownConventionError

__all__ = [
    "CaseKitError",
    "InvalidInputTypeError",
    "UnknownConventionError",
]
