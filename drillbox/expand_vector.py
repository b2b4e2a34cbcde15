"""A list of integers addressed by 1-based positions with bounds checking."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence


class ExpandVector:
    """Integers addressed by 1-based positions.

    A position is valid when it lies between 1 and the current length,
    inclusive; any other position raises IndexError.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = list(values)

    def _index(self, place: int) -> int:
        if not 1 <= place <= len(self._items):
            raise IndexError(
                f"position {place} is out of range 1..{len(self._items)}"
            )
        return place - 1

    def insert_at(self, place: int, value: int) -> None:
        """Insert ``value`` so that it ends up at position ``place``."""
        self._items.insert(self._index(place), value)

    def erase_at(self, place: int) -> int:
        """Remove and return the element at position ``place``."""
        return self._items.pop(self._index(place))

    def erase_value(self, value: int) -> int:
        """Remove every element equal to ``value``; return how many went."""
        before = len(self._items)
        self._items = [item for item in self._items if item != value]
        return before - len(self._items)

    def change(self, place: int, value: int) -> None:
        """Replace the element at position ``place`` with ``value``."""
        self._items[self._index(place)] = value

    def get_at(self, place: int) -> int:
        """Return the element at position ``place``."""
        return self._items[self._index(place)]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


def _read_values(argv: Sequence[str]) -> list[int]:
    words = list(argv)
    if not words:
        print("Enter initial values separated by spaces, end with EOF:")
        words = sys.stdin.read().split()
    return [int(word) for word in words]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration on values from the arguments or standard input."""
    args = sys.argv[1:] if argv is None else argv
    try:
        values = _read_values(args)
    except ValueError as exc:
        print(f"invalid value: {exc}", file=sys.stderr)
        return 2

    vector = ExpandVector(values)

    try:
        vector.erase_at(5)
        print("The 5th number erase succeeded")
    except IndexError:
        print("transboundary")

    print("insert 666 at 5th ", end="")
    try:
        vector.insert_at(5, 666)
        print("succeeded")
    except IndexError:
        print("transboundary")

    try:
        vector.change(4, 888)
        print("The 4th number change succeeded")
    except IndexError:
        print("transboundary")

    try:
        print(f"The 6th number this {vector.get_at(6)}")
    except IndexError:
        print("It's transboundary.")

    print("main end")
    for item in vector:
        print(f"value of v = {item}")
    return 0


if __name__ == "__main__":
    sys.exit(main())