import threading

import pytest

from trantorkit.mpsc_queue import MpscQueue, QueueEmpty


def test_new_queue_is_empty():
    queue = MpscQueue()
    assert queue.empty() is True
    assert len(queue) == 0


def test_dequeue_empty_raises():
    queue = MpscQueue()
    with pytest.raises(QueueEmpty):
        queue.dequeue()


def test_queue_empty_is_index_error():
    queue = MpscQueue()
    with pytest.raises(IndexError):
        queue.dequeue()


def test_fifo_order():
    queue = MpscQueue()
    items = ["a", "b", "c", "d"]
    for item in items:
        queue.enqueue(item)
    assert queue.empty() is False
    assert [queue.dequeue() for _ in items] == items
    assert queue.empty() is True


def test_dequeue_after_drained_raises():
    queue = MpscQueue()
    queue.enqueue(1)
    assert queue.dequeue() == 1
    with pytest.raises(QueueEmpty):
        queue.dequeue()


def test_drain_yields_everything_in_order():
    queue = MpscQueue()
    items = list(range(50))
    for item in items:
        queue.enqueue(item)
    assert list(queue.drain()) == items
    assert queue.empty() is True


def test_items_are_not_copied():
    queue = MpscQueue()
    payload = {"key": [1, 2]}
    queue.enqueue(payload)
    assert queue.dequeue() is payload


def test_many_producers_one_consumer():
    queue = MpscQueue()
    producers = 8
    per_producer = 2000

    def produce(pid):
        for seq in range(per_producer):
            queue.enqueue((pid, seq))

    threads = [threading.Thread(target=produce, args=(pid,)) for pid in range(producers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    received = list(queue.drain())
    assert len(received) == producers * per_producer
    assert sorted(received) == [
        (pid, seq) for pid in range(producers) for seq in range(per_producer)
    ]
    for pid in range(producers):
        sequence = [seq for p, seq in received if p == pid]
        assert sequence == list(range(per_producer))