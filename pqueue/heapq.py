# Implicit binary tree over a flat priority array, 0-based: root at 0,
# children of i at 2i+1 and 2i+2.

import numba as nb


@nb.jit
def parent(pos):
  return (pos - 1) >> 1


@nb.jit
def left(pos):
  return 2 * pos + 1


@nb.jit
def right(pos):
  return 2 * pos + 2


@nb.jit
def _swap(priorities, order, i, j):
  priorities[i], priorities[j] = priorities[j], priorities[i]
  order[i], order[j] = order[j], order[i]


@nb.jit
def siftup(priorities, pos):
  item = priorities[pos]

  while pos > 0:
    parentpos = parent(pos)
    parent_priority = priorities[parentpos]

    if item < parent_priority:
      priorities[pos] = parent_priority
      pos = parentpos
    else:
      break

  priorities[pos] = item
  return pos


@nb.jit
def reheapify(priorities, order):
  """
  Repeat full bottom-up passes over the internal nodes, swapping a node with
  a smaller child, until a pass makes no swaps. Returns the number of passes.
  """
  endpos = len(priorities)
  passes = 0
  solved = False

  while not solved:
    solved = True
    passes += 1

    for pos in range(endpos // 2 - 1, -1, -1):
      childpos = left(pos)
      rightpos = right(pos)

      if priorities[pos] > priorities[childpos]:
        _swap(priorities, order, pos, childpos)
        solved = False
      elif rightpos < endpos and priorities[pos] > priorities[rightpos]:
        _swap(priorities, order, pos, rightpos)
        solved = False

  return passes


@nb.jit
def is_heap(priorities):
  for pos in range(1, len(priorities)):
    if priorities[parent(pos)] > priorities[pos]:
      return False

  return True
