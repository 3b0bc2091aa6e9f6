# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
fixed set of operations. It prints each operation on its own line.

The operations are:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top element of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both upward (the top goes to the bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both downward (the bottom goes to the top) |

The program picks a method by input size:

- Three or fewer values are sorted directly.
- Up to five values are sorted by a short routine that parks the two smallest on `b`.
- Larger inputs are sorted with a binary radix sort over each value's rank.

## Installation

```
pip install .
```

## Command line

Pass the numbers either as separate arguments or as one space-separated
argument:

```
push-swap 3 2 1
push-swap "5 1 4 2 3"
```

`python -m pushswap.cli 3 2 1` does the same.

The output follows these rules:

- Each operation is printed on its own line.
- An input that is already sorted prints nothing.
- Running with no arguments does nothing.

The program prints `ERROR` to standard output and exits with status 1 if any value:

- is not an optional leading `-` followed only by digits (a leading `+` is rejected),
- lies outside the 32-bit signed range, or
- appears twice.

## Library use

```python
from pushswap.parsing import InputError, assign_ranks, check_input, read_values
from pushswap.sorting import sort_stack
from pushswap.stacks import Stacks

args = ["4", "-1", "7", "0"]
check_input(args)                        # raises InputError on bad input
ranks = assign_ranks(read_values(args))  # each value replaced by its 0-based rank
result = sort_stack(ranks)               # a Stacks holding the sorted ranks
print([str(op) for op in result.operations])

replay = Stacks(ranks)
for operation in result.operations:
    replay.apply(operation)              # an Operation or its name, e.g. "ra"
assert replay.is_sorted()
```

### `pushswap.stacks`

- `Operation` is an enum of the eleven instructions, valued and printed by their names.
- `Stacks` holds the deques `a` and `b`, with their tops on the left.
- `Stacks` has one method per operation: `push_a`, `push_b`, `swap_a`, `swap_b`, `swap_both`, `rotate_a`, `rotate_b`, `rotate_both`, `reverse_rotate_a`, `reverse_rotate_b` and `reverse_rotate_both`.
- Every call is logged in `operations`, even one that changes nothing.

### `pushswap.sorting`

- `sort_stack(ranks)` is the entry point.
- `sort_three`, `sort_five`, `radix_sort`, `find_max_index` and `find_max_bits` are the steps it uses.

### `pushswap.parsing`

- `parse_long`
- `is_valid_number`
- `split_arguments`
- `check_input`
- `read_values`
- `assign_ranks`
- `InputError`, a subclass of `ValueError`

### `pushswap.libft`

A small set of helpers in the style of the C library:

- `chars`: ASCII classification and case conversion.
- `memory`: operations on byte buffers.
- `output`: writing to a text stream.
- `strings`: `atoi`, `itoa`, searching and comparing.
- `transform`: `split`, `strjoin`, `strtrim`, `substr`, `strlcpy`, `strlcat`, `strmapi` and `striteri`.
- `lists`: a singly linked `LinkedList` of `Node`s.

## Tests

```
pip install ".[test]"
pytest
```