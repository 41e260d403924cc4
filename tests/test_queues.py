import pytest

from dsakit.queues import (
    ArrayQueue,
    CircularQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
)


def test_array_queue_fifo_and_exhaustion():
    q = ArrayQueue(4)
    for value in (12, 29, 45, 34):
        q.enqueue(value)
    assert q.is_full()
    assert [q.dequeue() for _ in range(4)] == [12, 29, 45, 34]
    assert q.is_empty()
    # slots of a linear array queue are not reused
    assert q.is_full()
    with pytest.raises(QueueFullError):
        q.enqueue(18)


def test_array_queue_empty_dequeue():
    q = ArrayQueue(4)
    assert q.is_empty()
    with pytest.raises(QueueEmptyError):
        q.dequeue()


def test_array_queue_overflow():
    q = ArrayQueue(1)
    q.enqueue(5)
    with pytest.raises(QueueFullError):
        q.enqueue(6)


def test_circular_queue_capacity_is_size_minus_one():
    q = CircularQueue(4)
    for value in (12, 29, 45):
        q.enqueue(value)
    assert q.is_full()
    with pytest.raises(QueueFullError):
        q.enqueue(18)


def test_circular_queue_reuses_slots():
    q = CircularQueue(4)
    for value in (12, 29, 45):
        q.enqueue(value)
    assert [q.dequeue() for _ in range(3)] == [12, 29, 45]
    assert q.is_empty()
    q.enqueue(18)
    assert not q.is_empty()
    assert not q.is_full()
    assert q.dequeue() == 18


def test_circular_queue_long_run_fifo():
    q = CircularQueue(3)
    out = []
    for value in range(10):
        q.enqueue(value)
        out.append(q.dequeue())
    assert out == list(range(10))


def test_circular_queue_empty_dequeue():
    with pytest.raises(QueueEmptyError):
        CircularQueue(4).dequeue()


def test_circular_queue_bad_size():
    with pytest.raises(ValueError):
        CircularQueue(0)


def test_linked_queue_iteration_and_length():
    q = LinkedQueue()
    for value in (34, 4, 7):
        q.enqueue(value)
    assert list(q) == [34, 4, 7]
    assert len(q) == 3
    assert q.dequeue() == 34
    assert list(q) == [4, 7]
    assert len(q) == 2


def test_linked_queue_drain_and_refill():
    q = LinkedQueue()
    q.enqueue(1)
    assert q.dequeue() == 1
    assert q.is_empty()
    q.enqueue(2)
    assert list(q) == [2]


def test_linked_queue_empty_dequeue():
    with pytest.raises(QueueEmptyError):
        LinkedQueue().dequeue()