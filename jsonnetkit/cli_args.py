"""Helpers for command line handling: argument expansion, input and output."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Iterator, Sequence

_INT_RE = re.compile(r"[+-]?[0-9]+")


class ArgumentError(Exception):
    """A command line argument or input file could not be used."""


def simplify_args(args: Sequence[str]) -> list[str]:
    """Expand ``-abc`` into ``-a -b -c`` for arguments before the first ``--``."""
    result: list[str] = []
    for position, arg in enumerate(args):
        if arg == "--":
            result.extend(args[position:])
            break
        if len(arg) > 2 and arg[0] == "-" and arg[1] != "-":
            result.extend("-" + letter for letter in arg[1:])
        else:
            result.append(arg)
    return result


def next_arg(args_iter: Iterator[str]) -> str:
    """The next argument from ``args_iter``."""
    try:
        return next(args_iter)
    except StopIteration:
        raise ArgumentError("Expected another commandline argument.") from None


def safe_str_to_int(text: str) -> int:
    """Parse a decimal integer, as written on a command line."""
    if not _INT_RE.fullmatch(text):
        raise ArgumentError(f'Invalid integer "{text}"')
    return int(text)


def read_input(filename_is_code: bool, filename: str) -> tuple[str, str]:
    """Read code from the command line, stdin (``-``) or a file.

    Returns the code and the name to report it under.
    """
    if filename_is_code:
        return filename, "<cmdline>"
    if filename == "-":
        return sys.stdin.read(), "<stdin>"
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            return handle.read(), filename
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise ArgumentError(f"Opening input file: {filename}: {reason}") from exc


def write_output_file(output: str, output_file: str, create_dirs: bool) -> None:
    """Write ``output`` to ``output_file``, or to stdout when it is empty."""
    if output_file == "":
        sys.stdout.write(output)
        return
    if create_dirs:
        directory = os.path.dirname(output_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
    with open(output_file, "w", encoding="utf-8", newline="") as handle:
        handle.write(output)