# pushswap

Sort a list of distinct integers using two stacks, **a** and **b**, and a
fixed set of eleven operations. The `push-swap` command prints the
operations it chooses; the `push-swap-checker` command replays a list of
operations and reports whether it leaves stack **a** sorted.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of a, b, or both |
| `pa`, `pb` | push the top of b onto a, or the top of a onto b |
| `ra`, `rb`, `rr` | rotate a, b, or both upwards (the top goes to the bottom) |
| `rra`, `rrb`, `rrr` | rotate a, b, or both downwards (the bottom goes to the top) |

An operation on a stack with too few elements does nothing.

## Installation

```
pip install .
```

## Sorting

Give the numbers as arguments, either separately or as one quoted string
of space-separated numbers. The first number is the top of stack a.

```
push-swap 3 2 1
push-swap "5 -3 12 0 7"
```

Each chosen operation is printed on its own line. Input that is already
sorted, and a call with no arguments, print nothing.

When the input is invalid, `Error` is written to standard error and the
command exits with a non-zero status. Input is invalid when:

- a word contains anything other than digits and a single leading `+` or `-`
  (words are separated by spaces only)
- a number lies outside the 32-bit signed range
- a number appears twice
- the arguments hold no numbers at all

Up to three numbers are sorted directly; longer inputs use a cost-driven
strategy that moves each value to the place where it is cheapest to insert.

## Checking

Pipe a list of operations, one per line, into the checker together with the
same numbers:

```
push-swap 4 1 3 2 | push-swap-checker 4 1 3 2
```

The checker prints `OK` if stack a ends up in ascending order from the top,
and `KO` otherwise; stack b is not inspected. If any line is not a known
operation, every valid line is still applied, and then `Error` is written
to standard error instead of a verdict.

Line matching is lenient: a line is accepted when it is the beginning of an
operation name followed by a newline, and the first operation in the order
`sa sb ss pa pb ra rb rr rra rrb rrr` that fits is used. So `ra` without a
trailing newline still means `ra`, and a lone `r` is read as `ra`.

Invalid numbers make the checker write `Error` to standard error and exit
with a non-zero status; called with no arguments it exits with a non-zero
status and prints nothing.

## Library use

```python
from pushswap.parsing import parse_arguments
from pushswap.sorting import sort_operations
from pushswap.stack import State, format_state

values = parse_arguments(["3 1 2"])
ops = sort_operations(values)

state = State(values)
state.run(ops)
assert state.is_sorted()
print(format_state(state))
```

- `pushswap.parsing.parse_arguments(args)` returns the values of stack a and
  raises `ParseError` for invalid input.
- `pushswap.sorting.sort_operations(values)` returns a list of `Operation`
  members that sorts the values.
- `pushswap.stack.State` holds both stacks and a log of the operations that
  took effect; `apply(op)` and `run(ops)` accept `Operation` members or their
  names as strings.
- `pushswap.checker.run_checker(values, lines)` replays operation lines and
  returns `"OK"` or `"KO"`; it raises `InvalidOperation` if any line is not a
  known operation. `match_operation(line)` gives the operation for one line.

## Development

```
pip install -e .[test]
pytest
```