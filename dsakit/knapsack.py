"""Greedy 0/1 knapsack selection by value, weight or value-to-weight ratio."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import IntEnum


@dataclass(frozen=True)
class Item:
    """An item with a 1-based index, a value and a weight."""

    index: int
    value: int
    weight: int

    @property
    def ratio(self) -> float:
        """Value per unit of weight; infinite for weightless items."""
        if self.weight == 0:
            return math.inf
        return self.value / self.weight


class Strategy(IntEnum):
    """Order in which items are considered for the knapsack."""

    VALUE = 1
    WEIGHT = 2
    RATIO = 3

    @property
    def heading(self) -> str:
        return _HEADINGS[self]


_HEADINGS = {
    Strategy.VALUE: "Value (highest first)",
    Strategy.WEIGHT: "Weight (lowest first)",
    Strategy.RATIO: "Value/Weight Ratio (highest first)",
}

_ORDERINGS: dict[Strategy, tuple[Callable[[Item], float], bool]] = {
    Strategy.VALUE: (lambda item: item.value, True),
    Strategy.WEIGHT: (lambda item: item.weight, False),
    Strategy.RATIO: (lambda item: item.ratio, True),
}


@dataclass(frozen=True)
class Selection:
    """Items taken for a knapsack of a given capacity, in the order taken."""

    taken: tuple[Item, ...]
    capacity: int

    @property
    def total_value(self) -> int:
        return sum(item.value for item in self.taken)

    @property
    def total_weight(self) -> int:
        return sum(item.weight for item in self.taken)

    @property
    def remaining(self) -> int:
        return self.capacity - self.total_weight


def make_items(pairs: Iterable[tuple[int, int]]) -> list[Item]:
    """Build items numbered from 1 from ``(value, weight)`` pairs."""
    return [Item(index, value, weight) for index, (value, weight) in enumerate(pairs, 1)]


def pick_items(items: Iterable[Item], capacity: int, strategy: Strategy) -> Selection:
    """Greedily take whole items in the strategy's order while they fit."""
    key, descending = _ORDERINGS[Strategy(strategy)]
    remaining = capacity
    taken = []
    for item in sorted(items, key=key, reverse=descending):
        if remaining <= 0:
            break
        if item.weight <= remaining:
            taken.append(item)
            remaining -= item.weight
    return Selection(tuple(taken), capacity)


def format_items(items: Iterable[Item]) -> str:
    """Render the item table."""
    lines = ["", "Items:", "Item\tValue\tWeight\tValue/Weight"]
    lines.extend(
        f"{item.index}\t{item.value}\t{item.weight}\t{item.ratio:.2f}" for item in items
    )
    return "\n".join(lines) + "\n"


def format_selection(selection: Selection, strategy: Strategy) -> str:
    """Render the items taken under ``strategy`` and their total value."""
    lines = [
        "",
        f"Picking items by {Strategy(strategy).heading}:",
        "Item\tValue\tWeight\tTaken",
    ]
    lines.extend(
        f"{item.index}\t{item.value}\t{item.weight}\t{item.weight}"
        for item in selection.taken
    )
    lines.append(f"Total value = {selection.total_value}")
    return "\n".join(lines) + "\n"


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for items, a capacity and a strategy, then print the selection."""
    parser = argparse.ArgumentParser(
        prog="dsakit-knapsack",
        description="Interactively pick knapsack items with a greedy strategy.",
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)

    def ask(prompt: str) -> int:
        print(prompt, end="", flush=True)
        try:
            return int(next(tokens))
        except StopIteration:
            raise SystemExit("\nerror: unexpected end of input") from None
        except ValueError as exc:
            raise SystemExit(f"\nerror: {exc}") from None

    count = ask("Enter number of items: ")
    print("Enter value and weight for each item:")
    pairs = []
    for number in range(1, count + 1):
        value = ask(f"Item {number} value: ")
        weight = ask(f"Item {number} weight: ")
        pairs.append((value, weight))
    items = make_items(pairs)

    capacity = ask("Enter knapsack capacity: ")
    print(format_items(items), end="")

    print("\nChoose picking strategy:")
    print("1. By Value (highest value first)")
    print("2. By Weight (lowest weight first)")
    print("3. By Value/Weight ratio (highest ratio first)")
    choice = ask("Enter choice (1-3): ")

    try:
        strategy = Strategy(choice)
    except ValueError:
        print("Invalid choice.")
        return 0
    print(format_selection(pick_items(items, capacity, strategy), strategy), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())