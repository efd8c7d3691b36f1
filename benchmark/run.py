#!/usr/bin/env python3

import logging
import numpy as np
import sys
from time import time

from pqueue.priority_queue import PriorityQueue
from pqueue.utils import custom_print, format_seconds


SIZES = [100, 500, 1000, 2000]


def random_pairs(n: int, seed: int = 0):
  rng = np.random.default_rng(seed)
  return [(int(p), i) for i, p in enumerate(rng.integers(0, 10 * n, size=n))]


def time_insert(pairs) -> float:
  q = PriorityQueue()
  t0 = time()
  for priority, value in pairs:
    q.insert(priority, value)
  return time() - t0


def time_insert_all(pairs) -> float:
  q = PriorityQueue()
  t0 = time()
  q.insert_all(pairs)
  return time() - t0


def time_drain(pairs) -> float:
  q = PriorityQueue()
  q.insert_all(pairs)
  t0 = time()
  while not q.empty():
    q.remove_front()
  return time() - t0


def main(sizes):
  # Warm up numba
  time_insert_all(random_pairs(10))
  time_drain(random_pairs(10))

  print("n,insert,insert_all,drain")

  for n in sizes:
    pairs = random_pairs(n)
    a, b, c = time_insert(pairs), time_insert_all(pairs), time_drain(pairs)
    custom_print(
      f'n={n}: insert {format_seconds(a)}, '
      f'insert_all {format_seconds(b)}, '
      f'drain {format_seconds(c)}', 'BENCHMARK')
    print(f"{n},{a:.6f},{b:.6f},{c:.6f}")


if __name__ == "__main__":
  logging.basicConfig(level=logging.INFO)

  if len(sys.argv) > 1:
    main([int(arg) for arg in sys.argv[1:]])
  else:
    main(SIZES)
