"""Check that a file of numbers is in non-decreasing order."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence, TextIO

EXIT_SORTED = 0
EXIT_UNSORTED = 1
EXIT_USAGE = -1
EXIT_OPEN_FAILED = -2


def is_nondecreasing(values: Iterable[float]) -> bool:
    """True when no value is smaller than the one before it."""
    items = list(values)
    return all(prev <= cur for prev, cur in zip(items, items[1:]))


def read_numbers(stream: TextIO) -> list[float]:
    """Read whitespace-separated numbers, stopping at the first token that is not one."""
    numbers: list[float] = []
    for token in stream.read().split():
        try:
            numbers.append(float(token))
        except ValueError:
            break
    return numbers


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Return 0 if the named file is sorted, 1 if not, negative on usage errors."""
    args = list(sys.argv[1:] if argv is None else argv)
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "sortcheck"
    if len(args) != 1:
        print(f"usage: {prog} filename", file=sys.stderr)
        return EXIT_USAGE
    path = args[0]
    try:
        with open(path, encoding="utf-8") as stream:
            numbers = read_numbers(stream)
    except OSError:
        print(f"{prog}: could not open file {path}", file=sys.stderr)
        return EXIT_OPEN_FAILED
    return EXIT_SORTED if is_nondecreasing(numbers) else EXIT_UNSORTED


if __name__ == "__main__":
    sys.exit(main())