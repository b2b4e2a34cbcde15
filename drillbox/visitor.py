"""Visitor pattern: places in a city accept visitors of different kinds."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence


class Place(ABC):
    """A sight that can be visited."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> None:
        """Let ``visitor`` visit this place."""


class BellTower(Place):
    def accept(self, visitor: Visitor) -> None:
        print("BellTower is accepting visitor.")
        visitor.visit_bell_tower(self)


class WhiteTower(Place):
    def accept(self, visitor: Visitor) -> None:
        print("WhiteTower is accepting visitor.")
        visitor.visit_white_tower(self)


class Visitor(ABC):
    """Something that does its own work at each kind of place."""

    @abstractmethod
    def visit_bell_tower(self, tower: BellTower) -> str:
        """Act at a bell tower and return what was reported."""

    @abstractmethod
    def visit_white_tower(self, tower: WhiteTower) -> str:
        """Act at a white tower and return what was reported."""


def _report(activity: str, tower: Place) -> str:
    message = f"I'm {activity} the {type(tower).__name__}!"
    print(message)
    return message


class Tourist(Visitor):
    def visit_bell_tower(self, tower: BellTower) -> str:
        return _report("visiting", tower)

    def visit_white_tower(self, tower: WhiteTower) -> str:
        return _report("visiting", tower)


class Cleaner(Visitor):
    def visit_bell_tower(self, tower: BellTower) -> str:
        return _report("cleaning", tower)

    def visit_white_tower(self, tower: WhiteTower) -> str:
        return _report("cleaning", tower)


class City:
    """An ordered collection of places."""

    def __init__(self) -> None:
        self._places: list[Place] = []

    @property
    def places(self) -> tuple[Place, ...]:
        return tuple(self._places)

    def attach(self, place: Place) -> None:
        self._places.append(place)

    def detach(self, place: Place) -> None:
        """Remove every occurrence of this very place object."""
        self._places = [p for p in self._places if p is not place]

    def accept(self, visitor: Visitor) -> None:
        """Have ``visitor`` visit each place in order."""
        for place in self._places:
            place.accept(visitor)


def main(argv: Sequence[str] | None = None) -> int:
    """Send a tourist and then a cleaner round both towers."""
    city = City()
    city.attach(BellTower())
    city.attach(WhiteTower())
    city.accept(Tourist())
    city.accept(Cleaner())
    return 0


if __name__ == "__main__":
    sys.exit(main())