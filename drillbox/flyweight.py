"""Flyweight pattern: a factory hands out shared concrete flyweights."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence


class FlyWeight(ABC):
    """A shared object whose behaviour is supplied by subclasses."""

    @abstractmethod
    def operation(self) -> str:
        """Carry out the flyweight's action and return what it reported."""


class ConcreteFlyWeight(FlyWeight):
    """The one concrete flyweight kind."""

    def operation(self) -> str:
        message = type(self).__name__
        print(message)
        return message


class FlyWeightFactory:
    """Creates the flyweights once and hands out the shared instances."""

    def __init__(self) -> None:
        self._flyweights: list[FlyWeight] = [ConcreteFlyWeight()]

    def get_flyweight(self, key: int) -> FlyWeight:
        """Return the flyweight stored under ``key``."""
        if not 0 <= key < len(self._flyweights):
            raise IndexError(f"no flyweight under key {key}")
        return self._flyweights[key]


def main(argv: Sequence[str] | None = None) -> int:
    """Fetch the first flyweight and run its operation."""
    factory = FlyWeightFactory()
    factory.get_flyweight(0).operation()
    return 0


if __name__ == "__main__":
    sys.exit(main())