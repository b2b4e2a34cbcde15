"""Mapping drills: word counting, insertion without overwrite, erasure."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Hashable, MutableMapping, Sequence
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@total_ordering
@dataclass(frozen=True)
class Name:
    """A person's name, ordered by second name and then by first name."""

    first: str = ""
    second: str = ""

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return (self.second, self.first) < (other.second, other.first)


def _letters_only(text: str) -> str:
    return "".join(ch if ch.isascii() and ch.isalpha() else " " for ch in text)


def word_counts(text: str) -> dict[str, int]:
    """Count the words of ``text``, keyed in sorted order.

    Every character that is not an ASCII letter separates words.
    """
    counts = Counter(_letters_only(text).split())
    return dict(sorted(counts.items()))


def format_word_counts(counts: MutableMapping[str, int] | dict[str, int]) -> str:
    """Lay out one word per line, right-aligned, followed by its count."""
    if not counts:
        return ""
    width = max(len(word) for word in counts) + 1
    return "\n".join(
        f"{word:>{width}}{count:>3}" for word, count in sorted(counts.items())
    )


def insert_if_absent(
    mapping: MutableMapping[K, V], key: K, value: V
) -> tuple[V, bool]:
    """Store ``value`` under ``key`` unless the key is already present.

    Return the value now stored under ``key`` and whether it was inserted.
    """
    if key in mapping:
        return mapping[key], False
    mapping[key] = value
    return value, True


def erase_key(mapping: MutableMapping[K, Any], key: K) -> bool:
    """Remove ``key``; return whether it was there."""
    if key in mapping:
        del mapping[key]
        return True
    return False


def erase_inner(mapping: MutableMapping[Any, Any]) -> Any:
    """Remove every entry but the first and last in key order.

    Return the key that follows the removed range, which is the last key.
    """
    keys = sorted(mapping)
    if len(keys) < 2:
        raise ValueError("need at least two entries to keep the first and last")
    for key in keys[1:-1]:
        del mapping[key]
    return keys[-1]


def _show_people(people: dict[str, int]) -> None:
    for name, age in sorted(people.items()):
        print(f"{name:<10} {age}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the mapping drills; text for counting comes from args or stdin."""
    args = sys.argv[1:] if argv is None else list(argv)

    numbers = [2, 3, 4, 5, 6]
    for value in (n for n in numbers if n != 3):
        print(f"v = {value}")
    for value in sorted({2, 3, 4, 5, 6} - {6}):
        print(f"vSet = {value}")
    letters = {"aaa": 1, "bbb": 2, "ccc": 3}
    erase_key(letters, "aaa")
    for key, value in letters.items():
        print(f"vMap = {key} {value}")

    people = {"Ann": 25, "Bill": 46, "Jack": 32, "Jill": 32}
    stored, inserted = insert_if_absent(people, "Fred", 22)
    print(f"Fred {stored} {str(inserted).lower()}")
    stored, inserted = insert_if_absent(people, "Bill", 48)
    print(f"Bill {stored} {str(inserted).lower()}")
    if not inserted:
        people["Bill"] = 48
    _show_people(people)
    print()
    insert_if_absent(people, "Jim", 48)
    insert_if_absent(people, "Ian", 38)
    insert_if_absent(people, "Cen", 38)
    _show_people(people)

    ages = {"Fred": 45, "Joan": 33, "Jill": 22}
    if "Joan" in ages:
        print(f"Joan is {ages['Joan']}")
    else:
        print("Not found.")
    if erase_key(ages, "Joan"):
        print("Joan was removed.")
    else:
        print("Joan was not found")

    ages = {"Fred": 45, "Joan": 33, "Jill": 22}
    following = erase_inner(ages)
    print(f"The element preceding {following} was removed.")

    print(str(("his", "hers") == ("his", "hers")).lower())
    print(
        " ".join(
            str(result).lower()
            for result in ((10, 9) < (10, 11), (10, 9) > (11, 9), (11, 9) > (10, 11))
        )
    )
    print(f"couple ordered: {Name('Jack', 'Jones') < Name('Jill', 'Smith')}")

    if args:
        text = " ".join(args)
    else:
        print("Enter some text and enter * to end:")
        text = sys.stdin.read()
    text = text.partition("*")[0]
    print(format_word_counts(word_counts(text)))
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())