"""Command line entry: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .chunks import pull_back, push_chunks
from .parsing import ParseError, parse_arguments
from .small import is_sorted, sort_five, sort_four, sort_three
from .stacks import Stacks


def assign_indices(stacks: Stacks) -> None:
    """Give each node of ``a`` its rank: how many values are smaller."""
    values = stacks.values_a()
    for node in stacks.a:
        node.index = sum(1 for value in values if node.value > value)


def solve(numbers: Iterable[int]) -> list[str]:
    """The list of moves that sorts ``numbers`` in stack ``a``."""
    stacks = Stacks(numbers)
    if is_sorted(stacks):
        return []
    if len(stacks.a) <= 3:
        sort_three(stacks)
        return stacks.operations
    assign_indices(stacks)
    if len(stacks.a) == 4:
        sort_four(stacks)
    elif len(stacks.a) == 5:
        sort_five(stacks)
    else:
        push_chunks(stacks)
        pull_back(stacks)
    return stacks.operations


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, print the moves one per line, return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        numbers = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    operations = solve(numbers)
    for name in operations:
        sys.stdout.write(f"{name}\n")
    if not operations:
        return 0
    return 1 if len(numbers) <= 5 else 0


if __name__ == "__main__":
    sys.exit(main())