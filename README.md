# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a fixed set
of operations, and prints the operations it used, one per line.

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |

Three elements are sorted directly, four or five by pushing the smallest
aside, and larger inputs by moving each element of `b` back into `a` at
the lowest combined rotation cost.

## Installation

```
pip install .
```

## Command line

The numbers may be given as separate arguments or as one
space-separated string:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

Each argument must be an optional `+` or `-` followed by digits, at most
11 characters long, within the 32-bit signed range, and no two arguments
may be the same text. Otherwise `Error` is printed and the exit status
is 1.

When there are fewer than two numbers, or no input at all, nothing is
checked and nothing is printed. Input that is already sorted prints
nothing.

## Library

```python
from pushswap.sorting import push_swap, is_sorted
from pushswap.stacks import Stacks
from pushswap.arguments import parse_arguments, ArgumentError

operations = push_swap([3, 2, 1])      # list of operation names

stacks = Stacks([3, 2, 1])
for op in operations:
    stacks.apply(op)
assert is_sorted(stacks.a)
```

- `pushswap.stacks.Stacks` holds the two stacks (`a`, `b`, top at index 0)
  and records every operation it carries out in `operations`. It has
  `swap`, `push`, `rotate`, `reverse_rotate`, `apply` (by operation name)
  and `render` (a text listing of one stack).
- `pushswap.sorting` has `push_swap`, `is_sorted`, `sort_three`,
  `sort_five` and `sort_all`.
- `pushswap.analysis` has the position, target and cost calculations
  used by the large-input strategy: `is_above_median`, `smallest_index`,
  `biggest_index`, `target_index`, `move_cost`, `cheapest_index`.
- `pushswap.arguments` has `split_arguments`, `is_duplicated`,
  `validate_arguments`, `parse_long` and `parse_arguments`; invalid input
  raises `ArgumentError`.
- `pushswap.cli.main(argv=None)` is the command-line entry point.

The `pushswap.libft` subpackage holds the helpers the program is built on:

- `chars`: ASCII classification and case conversion.
- `strings`: length, search, bounded copy and concatenation, `atoi`.
- `text`: `substr`, `strjoin`, `strtrim`, `strmapi`, `striteri`, `split`, `itoa`.
- `memory`: `bytearray` helpers (`memset`, `bzero`, `calloc`, `memchr`,
  `memcmp`, `memcpy`, `memmove`).
- `output`: `put_char`, `put_str`, `put_endl`, `put_nbr` to a text stream.
- `printf`: a `printf`-style formatter for `%[flags][width][.precision]`
  with specifiers `cspdiuxX%`; `format_string` returns the text, `printf`
  writes it to standard output, and bad conversions raise `FormatError`.

## Tests

```
pip install .[test]
pytest
```