import logging
import numpy as np
import operator
from typing import Any, Iterable

from .heapq import *
from .settings import QUEUE_SETTINGS


logger = logging.getLogger(__name__)


class MinHeap:
  """
  Binary min-heap of (priority, value) nodes.

  Priorities live in a growable int64 buffer so the invariant maintenance
  can run jitted; values are kept in a list at the same indices. Values only
  need to support ==.
  """

  priorities: np.ndarray
  values: list

  def __init__(self, capacity: int = None):
    if capacity is None:
      capacity = QUEUE_SETTINGS["INITIAL_CAPACITY"]

    self.priorities = np.empty(max(capacity, 1), dtype=np.int64)
    self.values = []


  def __len__(self):
    return len(self.values)

  def __iter__(self):
    for i, value in enumerate(self.values):
      yield int(self.priorities[i]), value

  def __repr__(self):
    return f"MinHeap({list(self)})"


  def size(self) -> int:
    return len(self.values)


  def peek_min(self) -> Any:
    """Value at the root. The heap must not be empty."""
    return self.values[0]


  def value_at(self, i: int) -> Any:
    if not 0 <= i < len(self.values):
      raise IndexError(f"heap index {i} out of range")

    return self.values[i]


  def priority_at(self, i: int) -> int:
    if not 0 <= i < len(self.values):
      raise IndexError(f"heap index {i} out of range")

    return int(self.priorities[i])


  def insert(self, priority: int, value) -> bool:
    priority = operator.index(priority)

    if priority < 0:
      logger.debug("Ignoring insert of %r with negative priority %d", value, priority)
      return False

    self.reserve(len(self.values) + 1)
    pos = len(self.values)
    self.priorities[pos] = priority
    self.values.append(value)

    final = siftup(self.priorities[:pos + 1], pos)
    self._settle(pos, final)
    return True


  def insert_all(self, pairs: Iterable) -> int:
    """
    Append every pair, negative priorities included, then re-heapify once.
    Returns the number of pairs appended. A malformed batch leaves the heap
    untouched.
    """
    pairs = list(pairs)
    priorities = np.fromiter(
      (operator.index(priority) for priority, _ in pairs),
      dtype=np.int64,
      count=len(pairs),
    )
    values = [value for _, value in pairs]

    start = len(self.values)
    self.reserve(start + len(pairs))
    self.priorities[start:start + len(pairs)] = priorities
    self.values.extend(values)

    self.reheapify()
    return len(pairs)


  def remove_min(self):
    """Drop the root node. The heap must not be empty."""
    if not self.values:
      raise IndexError("remove_min from an empty heap")

    last = len(self.values) - 1
    self.priorities[0] = self.priorities[last]
    self.values[0] = self.values[last]
    self.values.pop()

    self.reheapify()


  def find_first(self, value) -> int:
    for i, v in enumerate(self.values):
      if v == value:
        return i

    return -1


  def find_all(self, value) -> list[int]:
    return [i for i, v in enumerate(self.values) if v == value]


  def change_priority(self, value, new_priority: int) -> bool:
    i = self.find_first(value)

    if i == -1:
      return False

    self.priorities[i] = operator.index(new_priority)
    self.reheapify()
    return True


  def clear(self):
    self.values.clear()


  def check(self) -> bool:
    return is_heap(self.priorities[:len(self.values)])


  def reserve(self, n: int):
    capacity = len(self.priorities)

    if n <= capacity:
      return

    while capacity < n:
      capacity *= 2

    logger.debug("Growing priority buffer %d -> %d", len(self.priorities), capacity)
    grown = np.empty(capacity, dtype=np.int64)
    grown[:len(self.values)] = self.priorities[:len(self.values)]
    self.priorities = grown


  def reheapify(self):
    n = len(self.values)
    order = np.arange(n, dtype=np.int64)
    passes = reheapify(self.priorities[:n], order)

    if passes > 1:
      self.values = [self.values[i] for i in order]

    logger.debug("Re-heapified %d nodes in %d passes", n, passes)


  def _settle(self, pos: int, final: int):
    # Mirror siftup on the value list: ancestors on the path shift down one level.
    value = self.values[pos]

    while pos != final:
      up = parent(pos)
      self.values[pos] = self.values[up]
      pos = up

    self.values[final] = value
