"""Command-line entry point: print the instructions that sort the arguments."""

import sys
from typing import Optional, Sequence

from pushswap.arguments import ArgumentError, parse_arguments
from pushswap.sorting import push_swap


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sorter on ``argv`` (the arguments after the program name).

    Prints one instruction per line and returns 0, or prints ``Error``
    and returns 1 when the arguments are invalid.
    """
    if argv is None:
        argv = sys.argv[1:]
    try:
        values = parse_arguments(argv)
    except ArgumentError:
        sys.stdout.write("Error\n")
        return 1
    if not values:
        return 0
    sys.stdout.write("".join(f"{operation}\n" for operation in push_swap(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())