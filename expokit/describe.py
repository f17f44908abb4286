"""Objects that can describe themselves as text."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from functools import singledispatch


class Describable(ABC):
    """Anything that can produce a textual description of itself."""

    @abstractmethod
    def describe(self) -> str:
        """Return a description of this object."""


@dataclass
class Book(Describable):
    """A book with a title, an author and a page count."""

    title: str
    author: str
    pages: int

    def describe(self) -> str:
        return (
            "Descripción de libro:\n"
            f"Titulo: {self.title}\n"
            f"Autor: {self.author}\n"
            f"Numero de paginas: {self.pages}\n"
        )


class ComputerBrand(Enum):
    """Known computer manufacturers."""

    LENOVO = "Lenovo"
    HP = "HP"
    APPLE = "Apple"
    HUAWEI = "Huawei"

    def describe(self) -> str:
        return f"Marca: {self.value}"


Describable.register(ComputerBrand)


@dataclass
class Computer(Describable):
    """A computer with brand, CPU, RAM (GB) and storage (GB)."""

    brand: ComputerBrand
    cpu: str
    ram: int
    storage: int

    def describe(self) -> str:
        return (
            f"\n{self.brand.describe()}\n"
            f"CPU: {self.cpu}\n"
            f"RAM: {self.ram} GB\n"
            f" Almacenamiento: {self.storage}GB"
        )


@singledispatch
def describe(value) -> str:
    """Describe any describable value, list of integers or integer."""
    if isinstance(value, Describable):
        return value.describe()
    raise TypeError(f"cannot describe value of type {type(value).__name__}")


@describe.register
def _(value: list) -> str:
    return (
        "soy un vecor con las siguientes caracteristicas:\n"
        f"Longitud: {len(value)}\n"
        f"Capacidad: {len(value)}"
    )


@describe.register
def _(value: int) -> str:
    return f"Mi valor es: {value}"


def main(argv=None) -> int:
    """Print descriptions of a sample book and computer."""
    book = Book("Cracking the coding interview", "Gayle LaakMann McDowell", 696)
    computer = Computer(ComputerBrand.HUAWEI, "Intel Core i7", 32, 1024)
    print(book.describe())
    print(computer.describe())
    return 0