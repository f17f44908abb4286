# expokit

A collection of small, self-contained building blocks:

- `expokit.arith`: `add(left, right)`.
- `expokit.describe`: the `Describable` base class, with `Book`, `ComputerBrand`
  and `Computer`, plus a `describe(value)` function that also handles plain
  integers and lists.
- `expokit.generics`: `Holder`, a container for any value whose `value()`
  returns a copy and whose `describe_str()` works only for string contents;
  `to_text`, `longest(x, y)` (the second string on a tie),
  `first_part(text, separator)` and `ImportantPart`.
- `expokit.people`: `Person`, whose equality compares name and age and whose
  hash uses the age only, and `PersonMap`, a mutable mapping keyed by people
  that keeps `age_sum` and `average_age` up to date as items are inserted
  (removing items leaves them unchanged).
- `expokit.strikers`: `Striker`, `Programmer`, `Boxer` and
  `make_striker(strength)`, which returns a `Boxer` above strength 50 and a
  `Programmer` otherwise.
- `expokit.bits`: `float_bits(value)` gives the raw IEEE 754 double bits of a
  float, and `to_binary(value, width)` formats a non-negative integer as
  zero-padded binary.
- `expokit.linked_list`: `DoubleLinkedList`, a doubly linked list of integers
  built from `Node` objects.
- `expokit.demo`: `run_demo()`, which walks through the linked list
  operations and returns the report as text.
- `expokit.concurrency`: `ReadWriteLock` (context managers `read()` and
  `write()`), `WaitQueue` (`push`, and `pop` with an optional timeout that
  raises `TimeoutError`), `sum_in_thread`, `write_and_read` and
  `produce_and_consume`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from expokit.arith import add
from expokit.describe import describe
from expokit.linked_list import DoubleLinkedList

add(2, 2)          # 4
describe(0)        # "Mi valor es: 0"

items = DoubleLinkedList.from_iterable([1, 2, 3])
items.push_front(0)
items.push_back(4)
str(items)                 # "[0, 1, 2, 3, 4]"
items.remove_first()       # 0
items.remove_last()        # 4
items.update(lambda x: x + 10)
list(items)                # [11, 12, 13]
list(items.drain())        # [11, 12, 13], leaving the list empty
items.is_empty()           # True
```

```python
from expokit.people import Person, PersonMap

people = PersonMap()
daniel = Person("Daniel", 28)
people.insert(daniel, str(daniel))
daniel in people           # True
people.average_age         # 28
```

```python
from expokit.concurrency import WaitQueue, sum_in_thread

sum_in_thread([1, 2, 3])   # 6

queue = WaitQueue()
queue.push(7)
queue.pop(1.0)             # 7
```

## Commands

Each command runs a short demonstration and prints its results:

```
expokit-describe
expokit-generics
expokit-bits
expokit-list-demo
expokit-threads
```

`expokit-threads` accepts `--count` (items to queue, default 10) and
`--delay` (seconds between queued items, default 0.3).

## Not included

The package has no ordered enumeration of programming languages and no
command to demonstrate one.