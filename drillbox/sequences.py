"""Sequence drills: custom sorting, merging, resizing and box processing."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from itertools import groupby, islice, pairwise
from typing import Any, TypeVar

from drillbox.box import Box, parse_boxes

T = TypeVar("T")


def initial_then_length_key(text: str) -> tuple[int, int, int]:
    """Sort key: initial letter descending, then longer strings first.

    Empty strings sort after every non-empty one.
    """
    if not text:
        return (1, 0, 0)
    return (0, -ord(text[0]), -len(text))


def sort_initial_then_length(strings: Iterable[str]) -> list[str]:
    """Return the strings ordered by :func:`initial_then_length_key`."""
    return sorted(strings, key=initial_then_length_key)


def format_elements(items: Iterable[Any], per_line: int = 6) -> str:
    """Lay items out ``per_line`` to a line, separated by two spaces."""
    if per_line < 1:
        raise ValueError("per_line must be at least 1")
    iterator = iter(items)
    lines = []
    while chunk := list(islice(iterator, per_line)):
        lines.append("  ".join(str(item) for item in chunk))
    return "\n".join(lines)


def unique_consecutive(items: Iterable[T]) -> list[T]:
    """Drop each element that equals the one just before it."""
    return [key for key, _ in groupby(items)]


def _is_sorted(items: Sequence[Any]) -> bool:
    return not any(b < a for a, b in pairwise(items))


def merge_sorted(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Merge two ascending sequences into one ascending list.

    Elements of ``first`` come before equivalent elements of ``second``.
    """
    left, right = list(first), list(second)
    if not _is_sorted(left) or not _is_sorted(right):
        raise ValueError("both sequences must be in ascending order")
    return sorted([*left, *right])


def resize(values: Iterable[T], size: int, fill: Any = 0) -> list[Any]:
    """Truncate or pad ``values`` with ``fill`` to exactly ``size`` items."""
    if size < 0:
        raise ValueError("size must not be negative")
    result: list[Any] = list(islice(values, size))
    result.extend([fill] * (size - len(result)))
    return result


def insert_repeated(values: Iterable[T], index: int, count: int, value: T) -> list[T]:
    """Return a copy with ``count`` copies of ``value`` inserted at ``index``."""
    result = list(values)
    if count < 0:
        raise ValueError("count must not be negative")
    if not 0 <= index <= len(result):
        raise IndexError(f"index {index} is out of range 0..{len(result)}")
    result[index:index] = [value] * count
    return result


def erase_value(values: Iterable[T], value: T) -> list[T]:
    """Return a copy without any element equal to ``value``."""
    return [item for item in values if item != value]


def process_boxes(
    boxes: Iterable[Box], extra: Iterable[Box], min_volume: float = 30.0
) -> list[Box]:
    """Combine, sort, merge, deduplicate and filter boxes.

    The input boxes are taken in reverse order, the extra boxes are put in
    front, everything is sorted by volume, the sorted extras are merged in
    again, consecutive duplicates are dropped, and boxes with a volume
    below ``min_volume`` are removed.
    """
    extra_boxes = list(extra)
    combined = sorted([*extra_boxes, *reversed(list(boxes))])
    merged = merge_sorted(combined, sorted(extra_boxes))
    return [box for box in unique_consecutive(merged) if box.volume() >= min_volume]


_MORE_BOXES = (Box(3, 3, 3), Box(5, 5, 5), Box(4, 4, 4), Box(2, 2, 2))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sequence drills; boxes come from the arguments or stdin."""
    args = sys.argv[1:] if argv is None else list(argv)

    names = ["Jane", "Jim", "Jules", "Janet"]
    print("Sorted by initial, then length:")
    for name in sort_initial_then_length(names):
        print(f"value of l = {name}")

    merged = merge_sorted([2, 4, 6, 14], [-2, 1, 7, 10])
    print(format_elements(merged, 8))

    print(format_elements(resize([1, 2, 3], 7, 99)))
    print(format_elements(insert_repeated([55] * 10, 9, 3, 88)))
    print(format_elements(erase_value([4, 5, 6, 7, 8, 9], 8)))

    if args:
        text = " ".join(args)
    else:
        print("Enter box length, width, & height separated by spaces, end with EOF:")
        text = sys.stdin.read()
    try:
        boxes = parse_boxes(text)
    except ValueError as exc:
        print(f"invalid box: {exc}", file=sys.stderr)
        return 2

    result = process_boxes(boxes, _MORE_BOXES)
    print("After removing those with volume less than 30 the sorted sequence is:")
    print(format_elements(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())