"""
Command-line entry point.

Usage:
    casekit kebab HelloWorld helloWorldTest
    casekit camel "first name" --json
    printf 'user_id\\nSCREEN_NAME\\n' | casekit camel
    casekit camel 'SPECIAL_char$' --strip-special-chars
    casekit kebab -- -leading-dash

Values are read from the positional arguments, or one per non-empty line of
stdin when none are given. Put values that start with ``-`` after ``--``.
Settings are loaded from ``CASEKIT_*`` environment variables and the module
named by ``CASEKIT_CONFIG_MODULE`` before converting.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable, Sequence, TextIO

from pydantic import ValidationError

from .conf import load_settings, settings
from .conventions import SUPPORTED_CONVENTIONS
from .converter import convert_options
from .exceptions import CaseKitError
from .options import CaseOptions

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="casekit",
        description="Convert strings between naming conventions.",
    )
    parser.add_argument(
        "convention",
        help=f"Target convention ({', '.join(SUPPORTED_CONVENTIONS)}; aliases like 'kebab-case' are accepted).",
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="Strings to convert. Read from stdin, one per line, when omitted.",
    )
    parser.add_argument(
        "--strip-special-chars",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Drop characters other than letters, digits, whitespace, '-' and '_' before converting "
        "(default: the STRIP_SPECIAL_CHARS setting).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON array of {input, output} objects.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _read_values(stream: TextIO) -> list[str]:
    return [line.rstrip("\r\n") for line in stream if line.strip()]


def _render(pairs: Iterable[tuple[str, str]], as_json: bool) -> str:
    pairs = list(pairs)
    if as_json:
        return json.dumps([{"input": src, "output": out} for src, out in pairs])
    return "\n".join(out for _, out in pairs)


def main(argv: Sequence[str] | None = None, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    load_settings()
    try:
        options = CaseOptions.from_settings(
            settings,
            convention=args.convention,
            strip_special_chars=args.strip_special_chars,
        )
    except ValidationError as exc:
        parser.error(exc.errors()[0]["msg"])
    except CaseKitError as exc:
        parser.error(str(exc))

    values = args.values if args.values else _read_values(stdin)
    logger.debug("Converting %d value(s) with %r", len(values), options)

    pairs = [(value, convert_options(value, options)) for value in values]
    output = _render(pairs, args.json)
    if output:
        stdout.write(output + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
