"""Search algorithms and their supporting data structures."""

from astarpath.algorithms.astar import find_path
from astarpath.algorithms.pqueue import PriorityQueue, QueueItem

__all__ = ["find_path", "PriorityQueue", "QueueItem"]
