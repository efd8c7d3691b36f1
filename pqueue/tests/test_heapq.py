import numpy as np
import pytest

from pqueue.heapq import is_heap, left, parent, reheapify, right, siftup


def test_index_arithmetic():
    assert parent(1) == 0
    assert parent(2) == 0
    assert parent(5) == 2
    assert parent(6) == 2
    assert left(0) == 1
    assert right(0) == 2
    assert left(3) == 7
    assert right(3) == 8

    for pos in range(1, 50):
        assert pos in (left(parent(pos)), right(parent(pos)))


def test_siftup_moves_to_root():
    priorities = np.array([1, 3, 2, 0], dtype=np.int64)
    assert siftup(priorities, 3) == 0
    assert priorities.tolist() == [0, 1, 2, 3]


def test_siftup_stops_on_equal_parent():
    priorities = np.array([1, 4, 1], dtype=np.int64)
    assert siftup(priorities, 2) == 2
    assert priorities.tolist() == [1, 4, 1]


def test_siftup_partial():
    priorities = np.array([0, 5, 6, 7, 8, 9, 10, 3], dtype=np.int64)
    assert siftup(priorities, 7) == 1
    assert priorities.tolist() == [0, 3, 6, 5, 8, 9, 10, 7]
    assert is_heap(priorities)


def test_reheapify_valid_heap_takes_one_pass():
    priorities = np.array([1, 2, 3, 4, 5], dtype=np.int64)
    order = np.arange(5, dtype=np.int64)
    assert reheapify(priorities, order) == 1
    assert order.tolist() == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("n", [0, 1, 2, 3, 8, 31, 100])
def test_reheapify_descending(n):
    original = np.arange(n, 0, -1, dtype=np.int64)
    priorities = original.copy()
    order = np.arange(n, dtype=np.int64)

    passes = reheapify(priorities, order)

    assert passes >= 1
    assert is_heap(priorities)
    assert np.array_equal(original[order], priorities)
    assert sorted(order.tolist()) == list(range(n))


def test_reheapify_random():
    rng = np.random.default_rng(7)
    original = rng.integers(-50, 50, size=257).astype(np.int64)
    priorities = original.copy()
    order = np.arange(len(priorities), dtype=np.int64)

    reheapify(priorities, order)

    assert is_heap(priorities)
    assert np.array_equal(original[order], priorities)


def test_is_heap():
    assert is_heap(np.array([], dtype=np.int64))
    assert is_heap(np.array([3], dtype=np.int64))
    assert not is_heap(np.array([1, 1, 2, 5, 0], dtype=np.int64))
    assert is_heap(np.array([1, 1, 2, 5, 0], dtype=np.int64)[:4])
    assert not is_heap(np.array([2, 1], dtype=np.int64))
