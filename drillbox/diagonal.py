"""Integer points of an axis-aligned rectangle given two opposite corners."""

from __future__ import annotations

import sys
from collections.abc import Sequence

Point = tuple[int, int]

DEFAULT_WIDTH = 70
DEFAULT_HEIGHT = 48


def rectangle_points(begin: Point, end: Point) -> list[Point]:
    """Return every integer point inside or on the rectangle.

    Points are listed column by column: x ascending, then y ascending.
    """
    (x1, y1), (x2, y2) = begin, end
    return [
        (x, y)
        for x in range(min(x1, x2), max(x1, x2) + 1)
        for y in range(min(y1, y2), max(y1, y2) + 1)
    ]


def render(
    begin: Point,
    end: Point,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> str:
    """Draw the rectangle on a ``width`` by ``height`` grid.

    Points of the rectangle are ``0``; the begin corner is ``1`` and the
    end corner ``2``, the end winning when the two coincide.
    """
    if width < 1 or height < 1:
        raise ValueError("grid must be at least one cell wide and high")
    for x, y in (begin, end):
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"point ({x}, {y}) lies outside the {width}x{height} grid")
    grid = [[" "] * width for _ in range(height)]
    for x, y in rectangle_points(begin, end):
        grid[y][x] = "0"
    grid[begin[1]][begin[0]] = "1"
    grid[end[1]][end[0]] = "2"
    return "\n".join("".join(row) for row in grid)


def main(argv: Sequence[str] | None = None) -> int:
    """Draw rectangles from groups of four integers: x1 y1 x2 y2."""
    args = sys.argv[1:] if argv is None else list(argv)
    words = args if args else sys.stdin.read().split()
    try:
        numbers = [int(word) for word in words]
    except ValueError as exc:
        print(f"invalid coordinate: {exc}", file=sys.stderr)
        return 2
    if len(numbers) % 4:
        print("expected groups of four coordinates", file=sys.stderr)
        return 2
    for x1, y1, x2, y2 in zip(*[iter(numbers)] * 4):
        begin, end = (x1, y1), (x2, y2)
        if begin == end:
            print("It is just a point")
        try:
            print(render(begin, end))
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())