# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a fixed set of
operations, and prints the operations it used, one per line.

The operations are:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up by one (top goes to the bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down by one (bottom goes to the top) |

## Installing

```
pip install .
```

## Using the command

Give the numbers as separate arguments, or as one argument separated by spaces:

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

The same entry point can be run as `python -m pushswap.cli`.

The first number given is the top of stack `a`. Nothing is printed when no
arguments are given or when stack `a` needs no operation.

Two numbers are sorted with at most `sa`, three with at most two operations,
and larger inputs by pushing all but three numbers to `b` and bringing them
back one at a time, choosing each time the number that needs the fewest
rotations.

### Invalid input

`Error` is written to standard error and the command exits with status 1 when:

- a single argument holding spaces contains no numbers at all,
- one of the numbers after the first is not an integer (an optional `+` or
  `-` followed by digits) or falls outside the 32-bit signed range,
- one of the numbers after the first is written the same as another one after
  the first (a leading `+` is ignored in this comparison),
- more than one of the numbers after the first is a zero written as a single
  digit (`0`, `+0`, `-0`).

The first number is not checked: it is read leniently (leading whitespace and
a sign are skipped, reading stops at the first non-digit, and the value wraps
around to a 32-bit integer).

## Using it from Python

```python
from pushswap.cli import solve

solve(["3", "2", "1"])   # returns ["ra", "sa"]
```

`solve` raises `pushswap.parsing.InputError` (a `ValueError`) for invalid
input. `pushswap.cli.main(argv)` runs the command and returns its exit status.

Other modules:

- `pushswap.parsing`: `is_valid_input`, `parse_int`, `compare_numeric_strings`,
  `split_args`, `build_nodes` and `assign_indices`.
- `pushswap.stacks`: the `Node` dataclass, `is_sorted`, and `PushSwapStacks`,
  which holds the two stacks as deques and has one method per operation; each
  method passes the operation's name to the `emit` callback (printing it by
  default).
- `pushswap.algorithm`: the sorting steps, `sort_three`, `sort_large`,
  `assign_positions`, `lowest_index_position`, `assign_target_positions`,
  `assign_costs`, `cheapest_move` and `perform_move`.

The package also carries small helpers:

- `pushswap.chars`: ASCII classification and case conversion (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`).
- `pushswap.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strdup`, `substr`, `strjoin`, `strtrim`, `strmapi`, `striteri`.
- `pushswap.memory`: byte-buffer functions `memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`.
- `pushswap.conversions`: `atoi`, `itoa`, `split`, `strlcpy`, `strlcat`.
- `pushswap.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing to
  a text stream (standard output by default).
- `pushswap.linkedlist`: `LinkedList`, an ordered collection with
  `push_front`, `push_back`, `last`, `pop_front`, `clear`, `for_each` and `map`.

## What it does not do

The package only produces a sequence of operations. It has no command that
reads operations back and checks whether they sort a given input.

## Running the tests

```
pip install ".[test]"
pytest
```