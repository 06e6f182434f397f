"""Command that checks whether a list of operations read from input sorts the stack."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from .parsing import InputError, parse_arguments
from .stack import Operation, Stacks


def parse_command(line: str) -> Operation:
    """Read one newline-terminated operation name; raise InputError otherwise."""
    if not line.endswith("\n"):
        raise InputError()
    try:
        return Operation(line[:-1])
    except ValueError:
        raise InputError() from None


def run_checker(values: Sequence[int], lines: Iterable[str]) -> bool:
    """Apply the operations in ``lines`` and report whether the result is sorted."""
    stacks = Stacks(values)
    for line in lines:
        stacks.apply(parse_command(line))
    return stacks.is_solved(len(values))


def main(argv: Sequence[str] | None = None) -> int:
    """Print OK or KO for the operations on standard input; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
        solved = run_checker(values, sys.stdin)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if solved else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())