"""Finding a sequence of operations that sorts stack a.

Up to three values are handled directly. Larger inputs use the cost-driven
strategy. Two values go to stack b. Each remaining value of a, beyond the last
three, moves to b at the lowest rotation cost, next to its closest smaller
neighbour. The three left in a are sorted in place. Every value is then pushed
back above its closest larger neighbour. A final rotation brings the smallest
value to the top.
"""

from __future__ import annotations

from collections.abc import Sequence

from .stack import Operation, State, is_sorted

_ROTATIONS = {
    "a": (Operation.SA, Operation.RA, Operation.RRA),
    "b": (Operation.SB, Operation.RB, Operation.RRB),
}


def is_above_median(index: int, size: int) -> bool:
    """Return True when position ``index`` lies in the upper half of a stack of ``size``.

    For an odd size the middle position counts as upper half.
    """
    median = size // 2
    if size % 2 == 0:
        return median > index
    return median >= index


def median_cost(index: int, size: int) -> int:
    """Return the rotations needed to bring position ``index`` to the top.

    Upper-half positions are counted as forward rotations, the rest as
    reverse rotations.
    """
    return index if is_above_median(index, size) else size - index


def _stack(state: State, name: str) -> list[int]:
    if name == "a":
        return state.a
    if name == "b":
        return state.b
    raise ValueError(f"unknown stack {name!r}")


def sort_three(state: State, stack: str) -> None:
    """Sort a stack of at most three values in place, logging the operations."""
    values = _stack(state, stack)
    swap, rotate, reverse_rotate = _ROTATIONS[stack]
    if values:
        max_index = values.index(max(values))
        if max_index == 0:
            state.apply(rotate)
        elif max_index == 1:
            state.apply(reverse_rotate)
    if not is_sorted(_stack(state, stack)):
        state.apply(swap)


def _bring_to_top(state: State, stack: str, value: int, above: bool) -> None:
    _, rotate, reverse_rotate = _ROTATIONS[stack]
    op = rotate if above else reverse_rotate
    while _stack(state, stack)[0] != value:
        state.apply(op)


def _target_in_b(value: int, b: Sequence[int]) -> int:
    """Closest smaller value in b, or the largest of b when none is smaller."""
    smaller = [other for other in b if other < value]
    return max(smaller) if smaller else max(b)


def _target_in_a(value: int, a: Sequence[int]) -> int:
    """Closest larger value in a, or the smallest of a when none is larger."""
    larger = [other for other in a if other > value]
    return min(larger) if larger else min(a)


def _move_a_to_b(state: State) -> None:
    size_a, size_b = len(state.a), len(state.b)
    best: tuple[int, int, int, bool, bool] | None = None
    for index, value in enumerate(state.a):
        target = _target_in_b(value, state.b)
        target_index = state.b.index(target)
        a_above = is_above_median(index, size_a)
        t_above = is_above_median(target_index, size_b)
        cost = median_cost(index, size_a) + median_cost(target_index, size_b)
        if a_above and t_above:
            cost -= min(target_index, index)
        elif not a_above and not t_above:
            cost -= min(size_b - target_index, size_a - index)
        if best is None or cost < best[0]:
            best = (cost, value, target, a_above, t_above)
    assert best is not None
    _, value, target, a_above, t_above = best
    if a_above == t_above:
        both = Operation.RR if a_above else Operation.RRR
        while state.a[0] != value and state.b[0] != target:
            state.apply(both)
    _bring_to_top(state, "a", value, a_above)
    _bring_to_top(state, "b", target, t_above)
    state.apply(Operation.PB)


def _move_b_to_a(state: State) -> None:
    target = _target_in_a(state.b[0], state.a)
    above = is_above_median(state.a.index(target), len(state.a))
    _bring_to_top(state, "a", target, above)
    state.apply(Operation.PA)


def _final_rotation(state: State) -> None:
    smallest = min(state.a)
    above = is_above_median(state.a.index(smallest), len(state.a))
    _bring_to_top(state, "a", smallest, above)


def _turk_sort(state: State) -> None:
    while len(state.a) > 3 and len(state.b) < 2:
        state.apply(Operation.PB)
    while len(state.a) > 3:
        _move_a_to_b(state)
    sort_three(state, "a")
    while state.b:
        _move_b_to_a(state)
    _final_rotation(state)


def sort_operations(values: Sequence[int]) -> list[Operation]:
    """Return the operations that sort distinct ``values`` (top first) on stack a.

    Values already in ascending order need no operations.
    """
    state = State(list(values))
    if state.is_sorted():
        return []
    if len(state.a) <= 2:
        state.apply(Operation.SA)
    elif len(state.a) == 3:
        sort_three(state, "a")
    else:
        _turk_sort(state)
    return list(state.log)