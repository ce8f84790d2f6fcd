"""Default configuration values for casekit."""

DEFAULTS: dict[str, object] = {
    # Convention used by ``convert`` when the caller passes none
    "DEFAULT_CONVENTION": "kebab",
    # Drop characters other than ASCII letters, digits, whitespace, ``-`` and ``_``
    "STRIP_SPECIAL_CHARS": False,
}
