"""The two stacks of the puzzle and the eleven operations that act on them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

YELLOW = "\033[33m"
RESET = "\033[0m"


class Operation(Enum):
    """An instruction that rearranges the stacks."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def is_sorted(values: Sequence[int]) -> bool:
    """Return True when no value is greater than the one after it."""
    return all(left <= right for left, right in zip(values, values[1:]))


def _swap(stack: list[int]) -> bool:
    if len(stack) <= 1:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: list[int]) -> bool:
    if len(stack) <= 1:
        return False
    stack.append(stack.pop(0))
    return True


def _reverse_rotate(stack: list[int]) -> bool:
    if len(stack) <= 1:
        return False
    stack.insert(0, stack.pop())
    return True


def _push(source: list[int], target: list[int]) -> bool:
    if not source:
        return False
    target.insert(0, source.pop(0))
    return True


@dataclass
class State:
    """Stacks a and b, top first, with the log of operations that took effect.

    A single-stack operation that cannot act (a swap or rotation on fewer than
    two values, a push from an empty stack) is not logged; the combined
    operations ss, rr and rrr are always logged.
    """

    a: list[int]
    b: list[int] = field(default_factory=list)
    log: list[Operation] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.a = list(self.a)
        self.b = list(self.b)
        self.log = list(self.log)

    def apply(self, op: Operation | str) -> bool:
        """Carry out one operation; return whether it was logged."""
        op = Operation(op)
        if op is Operation.SA:
            done = _swap(self.a)
        elif op is Operation.SB:
            done = _swap(self.b)
        elif op is Operation.SS:
            _swap(self.a)
            _swap(self.b)
            done = True
        elif op is Operation.PA:
            done = _push(self.b, self.a)
        elif op is Operation.PB:
            done = _push(self.a, self.b)
        elif op is Operation.RA:
            done = _rotate(self.a)
        elif op is Operation.RB:
            done = _rotate(self.b)
        elif op is Operation.RR:
            _rotate(self.a)
            _rotate(self.b)
            done = True
        elif op is Operation.RRA:
            done = _reverse_rotate(self.a)
        elif op is Operation.RRB:
            done = _reverse_rotate(self.b)
        else:
            _reverse_rotate(self.a)
            _reverse_rotate(self.b)
            done = True
        if done:
            self.log.append(op)
        return done

    def run(self, ops: Iterable[Operation | str]) -> int:
        """Carry out operations in order; return how many were logged."""
        return sum(self.apply(op) for op in ops)

    def is_sorted(self) -> bool:
        """Return True when stack a is in ascending order from the top."""
        return is_sorted(self.a)


def format_state(state: State) -> str:
    """Render both stacks with their sizes, as the debugging view shows them."""
    a_line = " -> ".join(str(value) for value in state.a)
    b_line = " -> ".join(str(value) for value in state.b)
    return (
        f"{YELLOW}A - size: {len(state.a)}\n{a_line}"
        f"\n-------------\nB - size: {len(state.b)}\n{b_line}"
        f"\n{RESET}"
    )