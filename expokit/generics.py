"""A generic value holder and a few string helpers."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def to_text(value) -> str:
    """Return the display form of any value."""
    return str(value)


@dataclass
class Holder(Generic[T]):
    """Holds any value and hands out copies of it."""

    item: T

    def __str__(self) -> str:
        return (
            "Implementación del trait Display para mi estructura generica "
            f"que muestra cualquier cosa: {self.item}"
        )

    def value(self) -> T:
        """Return a copy of the held value."""
        return copy.copy(self.item)

    def describe_str(self) -> str:
        """Describe the held value; only available when it is a string."""
        if not isinstance(self.item, str):
            raise TypeError("describe_str is only available for string contents")
        return f"Mi valor es: {self.item}"


@dataclass(frozen=True)
class ImportantPart:
    """A slice of text worth keeping."""

    part: str


def longest(x: str, y: str) -> str:
    """Return the longer string; the second one on a tie."""
    return x if len(x) > len(y) else y


def first_part(text: str, separator: str = ",") -> ImportantPart:
    """Return the text before the first separator (all of it if absent)."""
    return ImportantPart(text.split(separator, 1)[0])


def main(argv=None) -> int:
    """Show the holder and string helpers at work."""
    g1 = Holder(7)
    g2 = Holder("Rust")
    print(f"Cualquier cosa dentro de g1: {g1.value()}")
    print(f"Cualquier cosa dentro de g2: {g2.value()}")
    print(g2.describe_str())
    print(to_text(g1))
    print(to_text(g2))

    text = "Rust es un lenguaje, de programación claro...."
    important = first_part(text)
    print(f'i: "{important.part}"')

    one, other = "un texto", "otro texto"
    print(
        f'El str más largo entre "{one}" y "{other}" es: "{longest(one, other)}"'
    )
    return 0