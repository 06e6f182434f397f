"""Command that prints the operations sorting the given integers."""

from __future__ import annotations

import sys
from typing import Sequence

from .parsing import InputError, parse_arguments
from .solver import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 1
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{op}\n" for op in solve(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())