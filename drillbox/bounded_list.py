"""A fixed-capacity list with 1-based lookup."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")

MAX_LENGTH = 1000


class BoundedList(Generic[T]):
    """A list that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int = MAX_LENGTH) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def add(self, value: T) -> None:
        """Append ``value``; raise OverflowError when the list is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError(f"list is full ({self.capacity} elements)")
        self._items.append(value)

    def delete(self) -> T:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("delete from an empty list")
        return self._items.pop()

    def show(self) -> None:
        """Print every element on a line of its own."""
        for item in self._items:
            print(item)

    def get_value_at(self, place: int) -> T:
        """Return the element at 1-based ``place``.

        A position past the end yields the last element.
        """
        if not self._items:
            raise IndexError("lookup in an empty list")
        if place < 1:
            raise IndexError(f"position {place} is before the first element")
        if place > len(self._items):
            return self._items[-1]
        return self._items[place - 1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


def _demo(label: str, first: object, second: object) -> None:
    print(f"type {label} test\n")
    items: BoundedList[object] = BoundedList()

    print(f"Add {first}-->Show:", end="")
    items.add(first)
    items.show()

    print(f"Add {second} and Getsecond Value:", end="")
    items.add(second)
    print(items.get_value_at(2))

    print("Get third Value:", end="")
    if 3 > len(items):
        print("GetValueAt Transboundary!")
    print(items.get_value_at(3))

    print("Delete Last-->Show:", end="")
    items.delete()
    items.show()
    print("*" * 40)


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise the list with integers, characters and strings."""
    _demo("int", 1, 23)
    _demo("char", "a", "b")
    _demo("string", "hello", "OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())