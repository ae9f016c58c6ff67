"""Fixed-capacity stack and queue containers."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class ContainerFullError(OverflowError):
    """Raised when a value is added to a container that has no room left."""


class ContainerEmptyError(IndexError):
    """Raised when a value is read or removed from an empty container."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"capacity must be positive, got {capacity}")
    return capacity


class Stack(Generic[T]):
    """A last-in, first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[T] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise ContainerFullError("Stack is full!")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if self.is_empty():
            raise ContainerEmptyError("Stack is empty!")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top value without removing it."""
        if self.is_empty():
            raise ContainerEmptyError("Stack is empty!")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self)!r}, capacity={self.capacity})"


class Queue(Generic[T]):
    """A linear first-in, first-out queue holding at most ``capacity`` values.

    Slots freed by :meth:`dequeue` become usable again only once the queue
    has been emptied completely, so the queue can report itself full while
    holding fewer than ``capacity`` values.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[T] = []
        self._front = 0

    def is_empty(self) -> bool:
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) >= self.capacity

    def enqueue(self, value: T) -> None:
        """Append ``value`` at the rear of the queue."""
        if self.is_full():
            raise ContainerFullError("Queue is full!")
        self._slots.append(value)

    def dequeue(self) -> T:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise ContainerEmptyError("Queue is empty!")
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots.clear()
            self._front = 0
        return value

    def peek(self) -> T:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise ContainerEmptyError("Queue is empty!")
        return self._slots[self._front]

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[T]:
        """Iterate from the front of the queue to the rear."""
        return iter(self._slots[self._front:])

    def __repr__(self) -> str:
        return f"Queue({list(self)!r}, capacity={self.capacity})"


def _print_contents(container: Stack[int] | Queue[int], name: str) -> None:
    if container.is_empty():
        print(f"{name} is empty!")
        return
    for value in container:
        print(value)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a short demonstration of the stack and the queue."""
    parser = argparse.ArgumentParser(
        prog="dsakit-containers",
        description="Demonstrate a bounded stack and queue.",
    )
    parser.parse_args(argv)

    stack: Stack[int] = Stack()
    for value in (12, 5, 9):
        stack.push(value)
    _print_contents(stack, "Stack")
    for _ in range(3):
        stack.pop()
    _print_contents(stack, "Stack")

    queue: Queue[int] = Queue()
    for value in (5, 9, 12, 15):
        queue.enqueue(value)
    queue.dequeue()
    queue.dequeue()
    _print_contents(queue, "Queue")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())