"""Command-line argument parsing for the asset builder."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Sequence


class ArgumentError(ValueError):
    """Raised when the command-line arguments are invalid."""


@dataclass(frozen=True)
class ParseResult:
    """Paths taken from the command line."""

    input_path: str = ""
    output_path: str = ""


def parse_args(argv: Sequence[str]) -> ParseResult:
    """Parse the arguments that follow the program name.

    ``-i PATH`` sets the input path and must have a value. ``-o PATH`` sets
    the output path; a trailing ``-o`` without a value is ignored. Later
    occurrences override earlier ones.
    """
    args = list(argv)
    if not args:
        raise ArgumentError("no arguments given")

    input_path = ""
    output_path = ""
    for arg, value in zip_longest(args, args[1:]):
        if arg == "-i":
            if value is None:
                raise ArgumentError("option -i requires a value")
            input_path = value
        elif arg == "-o" and value is not None:
            output_path = value
    return ParseResult(input_path, output_path)