# casekit/exceptions/base.py


class CaseKitError(Exception):
    """Base for all casekit exceptions."""


class InvalidInputTypeError(CaseKitError, TypeError):
    """Raised when a conversion receives a value that is not a ``str``.

    Values are never coerced: ``None``, numbers and ``bytes`` all fail fast.
    """

    def __init__(self, value: object, *, what: str = "input"):
        self.received_type = type(value).__name__
        super().__init__(f"Expected str for {what}, received {self.received_type}")


class UnknownConventionError(CaseKitError, ValueError):
    """Raised when a convention name does not resolve to a supported convention."""

    def __init__(self, value: str, supported: tuple[str, ...]):
        self.value = value
        self.supported = supported
        super().__init__(
            f"unsupported convention {value!r}; supported conventions: {', '.join(supported)}"
        )
