"""Command that checks whether a list of operations sorts the given integers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .parsing import ERROR_TEXT, ParseError, parse_arguments
from .stack import Operation, State

EXIT_FAILURE = -1

_MATCH_ORDER = (
    Operation.SA,
    Operation.SB,
    Operation.SS,
    Operation.PA,
    Operation.PB,
    Operation.RA,
    Operation.RB,
    Operation.RR,
    Operation.RRA,
    Operation.RRB,
    Operation.RRR,
)


class InvalidOperation(ValueError):
    """A line of input names no known operation."""


def match_operation(line: str) -> Operation:
    """Return the operation a line of input stands for.

    A line is accepted when it is a leading part of an operation name followed
    by a newline; the first operation in the order sa, sb, ss, pa, pb, ra, rb,
    rr, rra, rrb, rrr that fits wins. So "ra" without its newline still means
    ra, and a lone "r" is read as ra.
    """
    for op in _MATCH_ORDER:
        if f"{op.value}\n".startswith(line):
            return op
    raise InvalidOperation(f"unknown operation {line!r}")


def run_checker(values: Sequence[int], lines: Iterable[str]) -> str:
    """Apply every line to a stack holding ``values``; return "OK" or "KO".

    All valid lines are applied even after an invalid one; if any line was
    invalid, InvalidOperation is raised once the input is exhausted. Only
    stack a is inspected: it must be in ascending order from the top.
    """
    state = State(list(values))
    invalid: list[str] = []
    for line in lines:
        try:
            op = match_operation(line)
        except InvalidOperation:
            invalid.append(line)
            continue
        state.apply(op)
    if invalid:
        raise InvalidOperation(f"unknown operation {invalid[0]!r}")
    return "OK" if state.is_sorted() else "KO"


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and report OK, KO or an error."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return EXIT_FAILURE
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write(ERROR_TEXT)
        return EXIT_FAILURE
    try:
        verdict = run_checker(values, sys.stdin)
    except InvalidOperation:
        sys.stderr.write(ERROR_TEXT)
        return 0
    sys.stdout.write(f"{verdict}\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())