"""Thread coordination: a reader-writer lock, a blocking queue and demos."""

from __future__ import annotations

import argparse
import threading
import time
from collections import deque
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ReadWriteLock(Generic[T]):
    """Guards a value: many readers at once, or a single writer alone."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._cond = threading.Condition()
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self) -> Iterator[T]:
        """Hold shared access to the value for the duration of the block."""
        with self._cond:
            self._cond.wait_for(lambda: not self._writing)
            self._readers += 1
        try:
            yield self._value
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[T]:
        """Hold exclusive access to the value for the duration of the block."""
        with self._cond:
            self._cond.wait_for(lambda: not self._writing and self._readers == 0)
            self._writing = True
        try:
            yield self._value
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class WaitQueue(Generic[T]):
    """A FIFO queue whose consumers sleep until an item arrives."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()
        self._not_empty = threading.Condition()

    def push(self, item: T) -> None:
        """Append an item and wake one waiting consumer."""
        with self._not_empty:
            self._items.append(item)
            self._not_empty.notify()

    def pop(self, timeout: Optional[float] = None) -> T:
        """Remove and return the oldest item, waiting for one if needed.

        Raises TimeoutError if no item arrives within ``timeout`` seconds.
        """
        with self._not_empty:
            if not self._not_empty.wait_for(lambda: self._items, timeout):
                raise TimeoutError("no item arrived before the timeout")
            return self._items.popleft()

    def __len__(self) -> int:
        with self._not_empty:
            return len(self._items)


def sum_in_thread(numbers: Iterable[int]) -> int:
    """Sum the numbers in a separate thread and return the result."""
    owned = list(numbers)
    result: list[int] = []
    worker = threading.Thread(target=lambda: result.append(sum(owned)))
    worker.start()
    worker.join()
    return result[0]


def write_and_read(
    size: int = 5, delay: float = 0.002
) -> tuple[list[list[int]], list[list[int]]]:
    """Run a writer and a reader concurrently over a shared zeroed vector.

    The writer stores ``i`` at position ``i`` for every index; the reader
    takes ``size`` snapshots. Returns the writer's and reader's snapshots.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    data: ReadWriteLock[list[int]] = ReadWriteLock([0] * size)
    writes: list[list[int]] = []
    reads: list[list[int]] = []

    def writer() -> None:
        for i in range(size):
            with data.write() as vec:
                vec[i] = i
                writes.append(list(vec))
            time.sleep(delay)

    def reader() -> None:
        for _ in range(size):
            with data.read() as vec:
                reads.append(list(vec))
            time.sleep(delay)

    threads = [threading.Thread(target=writer), threading.Thread(target=reader)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return writes, reads


def produce_and_consume(count: int = 10, delay: float = 0.3) -> list[int]:
    """Feed 0..count-1 through a WaitQueue to a consumer thread.

    Returns the items in the order the consumer received them.
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    queue: WaitQueue[int] = WaitQueue()
    consumed: list[int] = []

    def consumer() -> None:
        for _ in range(count):
            consumed.append(queue.pop())

    worker = threading.Thread(target=consumer)
    worker.start()
    for item in range(count):
        queue.push(item)
        time.sleep(delay)
    worker.join()
    return consumed


def main(argv=None) -> int:
    """Run the threading demonstrations and print what they observed."""
    parser = argparse.ArgumentParser(description="Threading demonstrations.")
    parser.add_argument("--count", type=int, default=10, help="items to queue")
    parser.add_argument(
        "--delay", type=float, default=0.3, help="seconds between queued items"
    )
    args = parser.parse_args(argv)

    print(f"suma: {sum_in_thread([1, 2, 3])}")

    writes, reads = write_and_read()
    for snapshot in writes:
        print(f"Hilo de escritura: {snapshot}")
    for snapshot in reads:
        print(f"Hilo de lectura: {snapshot}")

    for value in produce_and_consume(args.count, args.delay):
        print(f"El hilo consumidor sacó de la cola: {value}")
    return 0