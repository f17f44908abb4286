"""People and a mapping keyed by them that tracks average age."""

from __future__ import annotations

from collections.abc import Iterator, MutableMapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

V = TypeVar("V")


@dataclass(frozen=True, eq=False)
class Person:
    """A named person with an age between 0 and 255."""

    name: str
    age: int

    def __post_init__(self) -> None:
        if not 0 <= self.age <= 255:
            raise ValueError(f"age must be between 0 and 255, got {self.age}")

    def __str__(self) -> str:
        return f"Nombre: {self.name}\nEdad: {self.age}"

    def __eq__(self, other):
        if not isinstance(other, Person):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(self.age)


@dataclass
class PersonMap(MutableMapping, Generic[V]):
    """A dict keyed by Person that keeps a running age sum and average."""

    _data: dict = field(default_factory=dict, repr=False)
    age_sum: int = 0
    average_age: int = 0

    def insert(self, key: Person, value: V) -> None:
        """Store a value, adding the key's age to the running statistics."""
        self.age_sum += key.age
        self._data[key] = value
        self.average_age = (self.age_sum // len(self._data)) % 256

    def __setitem__(self, key: Person, value: V) -> None:
        self.insert(key, value)

    def __getitem__(self, key: Person) -> V:
        return self._data[key]

    def __delitem__(self, key: Person) -> None:
        # Removal leaves the running statistics untouched.
        if key not in self._data:
            raise KeyError(key)
        self._data.pop(key)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)