"""Boxes with whole-number dimensions, ordered by volume."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Box:
    """A box whose dimensions are non-negative integers.

    Two boxes are equal when all three dimensions match; one box is less
    than another when its volume is smaller.
    """

    length: int = 1
    width: int = 1
    height: int = 1

    def __post_init__(self) -> None:
        for name in ("length", "width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an integer, not {value!r}")
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")

    def volume(self) -> int:
        """Return length times width times height."""
        return self.length * self.width * self.height

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return self.volume() < other.volume()

    def __str__(self) -> str:
        return f"Box({self.length},{self.width},{self.height})"


def parse_boxes(text: str) -> list[Box]:
    """Read boxes from whitespace-separated length, width, height triples."""
    words = text.split()
    if len(words) % 3:
        raise ValueError(
            f"expected whole triples of dimensions, got {len(words)} values"
        )
    try:
        numbers = [int(word) for word in words]
    except ValueError as exc:
        raise ValueError(f"invalid dimension: {exc}") from exc
    triples = zip(*[iter(numbers)] * 3)
    return [Box(length, width, height) for length, width, height in triples]