"""Divide-and-conquer maximum search."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from typing import Any


def find_max(values: Iterable[Any]) -> Any:
    """Return the largest value by splitting the sequence in halves."""
    items = list(values)
    if not items:
        raise ValueError("find_max() arg is an empty sequence")

    def search(start: int, end: int) -> Any:
        if start == end:
            return items[start]
        mid = (start + end) // 2
        left = search(start, mid)
        right = search(mid + 1, end)
        return left if left > right else right

    return search(0, len(items) - 1)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count and that many integers from standard input; print the maximum."""
    parser = argparse.ArgumentParser(
        prog="dsakit-findmax",
        description="Read N followed by N integers and print the largest.",
    )
    parser.parse_args(argv)

    tokens = sys.stdin.read().split()
    try:
        count = int(tokens[0])
        values = [int(token) for token in tokens[1 : count + 1]]
    except (IndexError, ValueError):
        print("error: expected a count followed by integers", file=sys.stderr)
        return 1
    if count < 1 or len(values) < count:
        print(f"error: expected {count} integers", file=sys.stderr)
        return 1

    print(find_max(values))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())