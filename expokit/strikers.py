"""Things that hit, chosen by strength."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Striker(ABC):
    """Something that can deliver a hit."""

    @abstractmethod
    def hit(self) -> int:
        """Return the strength of the hit."""


@dataclass
class Programmer(Striker):
    """A weak hitter."""

    strength: int

    def hit(self) -> int:
        return self.strength


@dataclass
class Boxer(Striker):
    """A strong hitter."""

    strength: int

    def hit(self) -> int:
        return self.strength


def make_striker(strength: int) -> Striker:
    """Return a Boxer above strength 50, otherwise a Programmer."""
    if strength > 50:
        return Boxer(strength)
    return Programmer(strength)