import threading
import time

import pytest

from expokit.concurrency import (
    ReadWriteLock,
    WaitQueue,
    main,
    produce_and_consume,
    sum_in_thread,
    write_and_read,
)


def test_sum_in_thread_matches_source_example():
    assert sum_in_thread([1, 2, 3]) == 6


def test_sum_in_thread_empty():
    assert sum_in_thread([]) == 0


def test_sum_in_thread_accepts_generator():
    assert sum_in_thread(x for x in [4, 5]) == sum([4, 5])


def test_write_and_read_final_state():
    writes, reads = write_and_read(5, 0)
    assert len(writes) == 5
    assert len(reads) == 5
    assert writes[-1] == list(range(5))


def test_write_and_read_writes_are_progressive():
    writes, _ = write_and_read(6, 0)
    for i, snapshot in enumerate(writes):
        assert snapshot[: i + 1] == list(range(i + 1))
        assert all(v == 0 for v in snapshot[i + 1 :])


def test_write_and_read_reads_see_consistent_states():
    writes, reads = write_and_read(5, 0.001)
    valid = [[0] * 5] + writes
    for snapshot in reads:
        assert snapshot in valid


def test_write_and_read_rejects_negative_size():
    with pytest.raises(ValueError):
        write_and_read(-1, 0)


def test_produce_and_consume_preserves_order():
    assert produce_and_consume(10, 0) == list(range(10))


def test_produce_and_consume_zero_items():
    assert produce_and_consume(0, 0) == []


def test_produce_and_consume_rejects_negative_count():
    with pytest.raises(ValueError):
        produce_and_consume(-3, 0)


def test_wait_queue_is_fifo():
    queue = WaitQueue()
    for item in ["a", "b", "c"]:
        queue.push(item)
    assert len(queue) == 3
    assert [queue.pop(), queue.pop(), queue.pop()] == ["a", "b", "c"]
    assert len(queue) == 0


def test_wait_queue_pop_times_out():
    queue = WaitQueue()
    with pytest.raises(TimeoutError):
        queue.pop(timeout=0.01)


def test_wait_queue_pop_wakes_on_push():
    queue = WaitQueue()
    producer = threading.Timer(0.05, queue.push, args=(42,))
    producer.start()
    try:
        assert queue.pop(timeout=5) == 42
    finally:
        producer.join(timeout=5)
    assert len(queue) == 0


def test_read_write_lock_write_mutates_value():
    lock = ReadWriteLock([0, 0])
    with lock.write() as vec:
        vec[1] = 9
    with lock.read() as vec:
        assert vec == [0, 9]


def test_read_write_lock_allows_concurrent_readers():
    lock = ReadWriteLock("shared")
    second_reader_in = threading.Event()

    def reader():
        with lock.read():
            second_reader_in.set()

    with lock.read() as value:
        thread = threading.Thread(target=reader)
        thread.start()
        assert second_reader_in.wait(timeout=2)
        assert value == "shared"
    thread.join(timeout=5)
    with lock.read() as value:
        assert value == "shared"


def test_read_write_lock_writer_waits_for_reader():
    lock = ReadWriteLock([0])
    entered = threading.Event()

    def writer():
        with lock.write() as vec:
            vec[0] = 1
            entered.set()

    with lock.read():
        thread = threading.Thread(target=writer)
        thread.start()
        time.sleep(0.05)
        assert not entered.is_set()
    thread.join(timeout=5)
    assert entered.is_set()
    with lock.read() as vec:
        assert vec == [1]


def test_main_prints_results(capsys):
    assert main(["--count", "3", "--delay", "0"]) == 0
    out = capsys.readouterr().out
    assert "suma: 6" in out
    assert "El hilo consumidor sacó de la cola: 2" in out
    assert "Hilo de escritura: [0, 1, 2, 3, 4]" in out