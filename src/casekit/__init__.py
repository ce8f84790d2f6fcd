"""
casekit: convert strings between naming conventions.

Supported conventions:

- kebab-case (``hello-world``)
- camelCase (``helloWorld``)
- dot.case (``hello.world``)

Every conversion is ``join(tokenize(value), convention)``:

- ``casekit.tokenizer`` splits text into lowercase words
- ``casekit.joiner`` re-joins words per convention
- ``casekit.converter`` is the façade most callers want

Import Guidelines:
------------------
- Use ``casekit.convert`` (re-exported here) for conversions.
- Use ``casekit.conf.settings`` to change the default convention or the
  special-character stripping default.
- Use ``casekit.exceptions`` for standardized error handling.
"""

from importlib.metadata import PackageNotFoundError, version

from .conventions import CAMEL, DOT, KEBAB, SUPPORTED_CONVENTIONS, normalize_convention
from .converter import convert, convert_options, to_camel_case, to_dot_case, to_kebab_case
from .exceptions import CaseKitError, InvalidInputTypeError, UnknownConventionError
from .joiner import join
from .options import CaseOptions
from .tokenizer import tokenize

try:
    __version__ = version("casekit")
except PackageNotFoundError:  # pragma: no cover - source checkout without install
    __version__ = "0.0.0"

__all__ = [
    "convert",
    "convert_options",
    "to_kebab_case",
    "to_camel_case",
    "to_dot_case",
    "tokenize",
    "join",
    "normalize_convention",
    "CaseOptions",
    "KEBAB",
    "CAMEL",
    "DOT",
    "SUPPORTED_CONVENTIONS",
    "CaseKitError",
    "InvalidInputTypeError",
    "UnknownConventionError",
    "__version__",
]
