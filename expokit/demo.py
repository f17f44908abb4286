"""A walk through the linked list operations, rendered as text."""

from __future__ import annotations

import argparse
import sys
from itertools import chain, islice
from typing import Optional

from expokit.linked_list import DoubleLinkedList

_RULE = "=" * 69


def _option(value: Optional[int]) -> str:
    return "None" if value is None else f"Some({value})"


def run_demo() -> str:
    """Exercise the linked list and return the resulting report."""
    lines: list[str] = []
    out = lines.append

    def rule() -> None:
        out("")
        out(_RULE)
        out("")

    out(_RULE)
    out("")

    lst = DoubleLinkedList()
    for value in (10, 20, 30):
        lst.push_back(value)
    out(
        "Lista después de push_back(10), push_back(20), push_back(30): "
        f"{lst}"
    )
    rule()

    lst.push_front(5)
    lst.push_front(1)
    out(f"Lista después de push_front(5) y push_front(1): {lst}")
    rule()

    first_removed = lst.remove_first()
    out(
        f"Primer elemento eliminado: {_option(first_removed)}, "
        f"Lista después de remove_first(): {lst}"
    )
    rule()

    last_removed = lst.remove_last()
    out(
        f"Último elemento eliminado: {_option(last_removed)}, "
        f"Lista después de remove_last(): {lst}"
    )
    rule()

    out(f"¿La lista está vacía?: {str(lst.is_empty()).lower()}")
    out(
        "¿La lista tiene un solo elemento?: "
        f"{str(lst.has_one_element()).lower()}"
    )
    rule()

    out("Iteración inmutable sobre la lista:")
    out("".join(f"{item} " for item in lst))
    rule()

    out("Modificando elementos de la lista en iteración mutable (+10):")
    lst.update(lambda item: item + 10)
    out(f"Lista después de iter_mut(): {lst}")
    rule()

    from_iter_list = DoubleLinkedList.from_iterable([100, 200, 300])
    out(
        "Lista creada a partir de un iterador (vec![100, 200, 300]): "
        f"{from_iter_list}"
    )
    rule()

    evens = [x for x in lst if x % 2 == 0]
    out(f"Elementos pares en la lista (usando filter): {evens}")
    rule()

    doubled = [x * 2 for x in lst]
    out(f"Elementos de la lista multiplicados por 2 (usando map): {doubled}")
    rule()

    first_two = list(islice(lst, 2))
    out(f"Primeros dos elementos de la lista (usando take): {first_two}")
    rule()

    skipped = list(islice(lst, 2, None))
    out(f"Lista sin los primeros dos elementos (usando skip): {skipped}")
    rule()

    enumerated = list(enumerate(lst))
    out(f"Elementos enumerados de la lista (usando enumerate): {enumerated}")
    rule()

    list_a = DoubleLinkedList.from_iterable([1, 2, 3])
    list_b = DoubleLinkedList.from_iterable([4, 5, 6])
    list_a = DoubleLinkedList.from_iterable(chain(list_a.drain(), list_b.drain()))
    out(f"Lista combinada (usando chain) de [1, 2, 3] y [4, 5, 6]: {list_a}")
    rule()

    return "\n".join(lines) + "\n"


def main(argv=None) -> int:
    """Print the linked list walkthrough."""
    parser = argparse.ArgumentParser(
        prog="expokit-demo",
        description="Walk through the doubly linked list operations.",
    )
    parser.parse_args(argv)
    report = run_demo()
    sys.stdout.write(report)
    sys.stdout.flush()
    return 0