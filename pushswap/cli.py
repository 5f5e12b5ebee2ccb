"""Command that prints the operations sorting the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import ERROR_TEXT, ParseError, parse_arguments
from .sorting import sort_operations
from .stack import is_sorted

EXIT_FAILURE = -1


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line that sorts the integers in ``argv``.

    Nothing is printed when there are no arguments or when the values are
    already in order. Invalid input writes an error to standard error.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write(ERROR_TEXT)
        return EXIT_FAILURE
    if is_sorted(values):
        return 0
    out = sys.stdout
    for op in sort_operations(values):
        out.write(f"{op}\n")
    out.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())