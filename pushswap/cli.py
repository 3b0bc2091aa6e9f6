"""Command that prints the operations sorting the numbers it is given."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.parsing import InputError, assign_ranks, check_input, read_values
from pushswap.sorting import sort_stack


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line; print ERROR and return 1 on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        check_input(args)
    except InputError:
        print("ERROR")
        return 1
    stacks = sort_stack(assign_ranks(read_values(args)))
    for operation in stacks.operations:
        print(operation)
    return 0


if __name__ == "__main__":
    sys.exit(main())