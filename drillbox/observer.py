"""Observer pattern: a subject notifies the observers attached to it."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence


class Observer:
    """Something that can be told that a subject has changed."""

    def update(self) -> None:
        """React to a notification; the base observer ignores it."""


class ConcreteObserver(Observer):
    """An observer that announces its name when updated."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    def update(self) -> None:
        print(f"{self.name} has Updated.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Subject(ABC):
    """Something observers can be attached to and detached from."""

    @abstractmethod
    def attach(self, observer: Observer) -> None:
        """Start notifying ``observer``."""

    @abstractmethod
    def detach(self, observer: Observer) -> None:
        """Stop notifying ``observer``."""


class ConcreteSubject(Subject):
    """Notifies attached observers in the order they were attached."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def attach(self, observer: Observer) -> None:
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Remove every attachment of this very observer object."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify(self) -> None:
        """Call ``update`` on each attached observer."""
        for observer in list(self._observers):
            observer.update()


def main(argv: Sequence[str] | None = None) -> int:
    """Attach two observers and notify them."""
    subject = ConcreteSubject()
    subject.attach(ConcreteObserver("hello"))
    subject.attach(ConcreteObserver("OK"))
    subject.notify()
    return 0


if __name__ == "__main__":
    sys.exit(main())