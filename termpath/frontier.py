# termpath/frontier.py
from __future__ import annotations
from collections import deque
from typing import Deque, Iterator, List, NamedTuple, Optional, Union
import heapq

from .types import Algorithm


class Node(NamedTuple):
    """Queue entry. Field order is the heap order: f, then g, then index."""
    f: int
    g: int
    index: int


class FifoFrontier:
    """Plain FIFO queue (BFS)."""

    def __init__(self) -> None:
        self.q: Deque[Node] = deque()

    def push(self, index: int, g: int, f: int) -> None:
        self.q.append(Node(f, g, index))

    def pop(self) -> Optional[Node]:
        return self.q.popleft() if self.q else None

    def indices(self) -> Iterator[int]:
        return (node.index for node in self.q)

    def __len__(self) -> int:
        return len(self.q)


class PriorityFrontier:
    """
    Min-heap of Nodes (Dijkstra, A*).
    Entries are never removed on relaxation; a superseded entry stays queued
    and is recognised as stale when popped after its cell was visited.
    """

    def __init__(self) -> None:
        self.h: List[Node] = []

    def push(self, index: int, g: int, f: int) -> None:
        heapq.heappush(self.h, Node(f, g, index))

    def pop(self) -> Optional[Node]:
        return heapq.heappop(self.h) if self.h else None

    def indices(self) -> Iterator[int]:
        return (node.index for node in self.h)

    def __len__(self) -> int:
        return len(self.h)


Frontier = Union[FifoFrontier, PriorityFrontier]


def make_frontier(algorithm: Algorithm) -> Frontier:
    if algorithm is Algorithm.BFS:
        return FifoFrontier()
    return PriorityFrontier()
