import logging
from typing import Any, Callable, Iterable, Optional

from .minheap import MinHeap
from .settings import QUEUE_SETTINGS


logger = logging.getLogger(__name__)


class PriorityQueue:
  """
  Priority queue with int priorities; lower values come out first.

  By default it keeps the lenient contract: negative priorities passed to
  insert are dropped, remove_front on an empty queue returns a sentinel
  (default_factory() or None), lookups of absent elements give -1 or do
  nothing. With strict=True (or QUEUE_SETTINGS["STRICT"]) those cases raise.
  insert_all accepts negative priorities in both modes.
  """

  heap: MinHeap
  default_factory: Optional[Callable[[], Any]]

  def __init__(self, default_factory: Optional[Callable[[], Any]] = None, strict: Optional[bool] = None):
    self.heap = MinHeap()
    self.default_factory = default_factory
    self._strict = strict


  @property
  def strict(self) -> bool:
    if self._strict is None:
      return QUEUE_SETTINGS["STRICT"]
    return self._strict


  def __len__(self):
    return self.heap.size()

  def __bool__(self):
    return not self.empty()

  def __contains__(self, element):
    return self.contains(element)

  def __repr__(self):
    items = ", ".join(f"{p}: {v!r}" for p, v in self.heap)
    return f"PriorityQueue({{{items}}})"


  def insert(self, priority: int, element):
    if not self.heap.insert(priority, element) and self.strict:
      raise ValueError(f"Negative priority {priority} for {element!r}")


  def insert_all(self, new_elements: Iterable):
    self.heap.insert_all(new_elements)


  def remove_front(self):
    if self.empty():
      if self.strict:
        raise IndexError("remove_front from an empty priority queue")

      logger.debug("remove_front on empty queue, returning sentinel")
      return self.sentinel()

    lowest = self.heap.peek_min()
    self.heap.remove_min()
    return lowest


  def peek(self):
    if self.strict and self.empty():
      raise IndexError("peek into an empty priority queue")

    return self.heap.peek_min()


  def sentinel(self):
    if self.default_factory is None:
      return None
    return self.default_factory()


  def get_all_elements(self) -> list:
    return [self.heap.value_at(i) for i in range(self.heap.size())]


  def get_all_priorities(self) -> list[int]:
    return [self.heap.priority_at(i) for i in range(self.heap.size())]


  def contains(self, element) -> bool:
    return self.heap.find_first(element) != -1


  def get_priority(self, element) -> int:
    """
    Priority of the first element equal to `element` in storage order, or
    the lowest one among duplicates when LOWEST_DUPLICATE_PRIORITY is set.
    -1 if nothing matches.
    """
    matches = self.heap.find_all(element)

    if not matches:
      if self.strict:
        raise KeyError(element)
      return -1

    if QUEUE_SETTINGS["LOWEST_DUPLICATE_PRIORITY"]:
      return min(self.heap.priority_at(i) for i in matches)

    return self.heap.priority_at(matches[0])


  def change_priority(self, element, new_priority: int):
    if not self.heap.change_priority(element, new_priority) and self.strict:
      raise KeyError(element)


  def size(self) -> int:
    return self.heap.size()


  def empty(self) -> bool:
    return self.heap.size() == 0


  def clear(self):
    self.heap.clear()
