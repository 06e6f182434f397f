# pushswap

This package sorts a list of distinct integers using two stacks, `a` and `b`,
and a small fixed set of operations. It has two commands. `push-swap` prints
the operations that sort the input. `push-swap-checker` replays a list of
operations and reports whether they sort the input.

## Operations

| Op    | Effect                                   |
|-------|------------------------------------------|
| `sa`  | swap the top two elements of `a`         |
| `sb`  | swap the top two elements of `b`         |
| `ss`  | `sa` and `sb` together                   |
| `pa`  | move the top of `b` onto `a`             |
| `pb`  | move the top of `a` onto `b`             |
| `ra`  | rotate `a` up (top goes to the bottom)   |
| `rb`  | rotate `b` up                            |
| `rr`  | `ra` and `rb` together                   |
| `rra` | rotate `a` down (bottom goes to the top) |
| `rrb` | rotate `b` down                          |
| `rrr` | `rra` and `rrb` together                 |

An operation with too few elements to act on does nothing. For example, `sa`
on a stack of one element leaves it as it is, and `pa` with `b` empty also
does nothing.

## Installation

```
pip install .
```

## Command line

To print the operations that sort the numbers, one per line, pass the numbers
as separate arguments or as one argument separated by spaces. The first number
is the top of `a`.

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

Input that is already sorted prints nothing.

To check a sequence of operations, give the same numbers to the checker and
pass the operations on standard input, one per line:

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

The checker prints `OK` when the operations leave `a` sorted with all of its
elements and `b` empty. Otherwise it prints `KO`.

Each command exits with status 1 and prints nothing when it is given no
arguments. `push-swap` also does this when its only argument is empty.

Each command rejects its input by printing `Error` on standard error and
exiting with status 1 in these cases:

- a value is not an optional `+` or `-` followed by one or more digits
- a value is outside the 32-bit signed range
- a value is repeated
- (checker only) a line is not one of the eleven operation names, or the last
  line has no terminating newline

You can also run the commands with `python -m pushswap.cli` and
`python -m pushswap.checker`.

## Library

```python
from pushswap.solver import solve
from pushswap.checker import run_checker

ops = solve([3, 2, 5, 1, 4])
print(run_checker([3, 2, 5, 1, 4], (f"{op}\n" for op in ops)))
```

- `pushswap.stack`
  - `Operation` is a string enum of the eleven operations.
  - `Stacks(values, record=False)` holds the lists `a` and `b`, top first.
  - `Stacks.apply(op)` takes either an `Operation` or its name. It raises
    `ValueError` for an unknown name.
  - With `record=True`, each applied operation is appended to
    `Stacks.operations`.
  - `Stacks.is_solved(expected_len=None)` checks the stacks: `a` is sorted,
    `b` is empty, and `a` has `expected_len` elements if that is given.
  - The functions `swap`, `rotate`, `reverse_rotate`, `push` and `is_sorted`
    act on plain lists.
- `pushswap.parsing`
  - `parse_arguments(args)` turns command-line words into integers. It
    raises `InputError` on bad input.
  - `split_words(text, sep=" ")` and `is_valid_number(text)` are the helpers
    it uses.
- `pushswap.solver`
  - `solve(values)` returns the list of operations that sort the values.
  - `cheapest_move(a, b)` returns the `Move` that costs least for bringing
    an element of `b` back into `a`.
  - `find_target(a, value)` gives the element of `a` that the value is placed
    above.
  - `tiny_sort(stacks)` sorts an `a` of two or three elements.
  - `handle_five(stacks)` pushes the smallest elements to `b` until three
    remain.
- `pushswap.checker`
  - `parse_command(line)` reads one newline-terminated operation.
  - `run_checker(values, lines)` applies the lines and returns whether the
    result is solved.

## Limitations

The solver does not promise the fewest operations. It uses a cost-based
strategy: it moves elements to `b`, then brings each one back at the lowest
rotation cost. There is no visual display of the stacks.