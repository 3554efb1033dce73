"""Stacks of integer nodes with the primitive moves the sorter is built on."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import combinations


@dataclass
class Node:
    """One element of a stack: its value and its rank among all values."""

    value: int
    index: int = 0


class Stack:
    """A double-ended stack of nodes; iteration runs from top to bottom."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(value) for value in values)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __getitem__(self, position: int) -> Node:
        return self._nodes[position]

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def push(self, node: Node) -> None:
        """Put a node on top of the stack."""
        self._nodes.appendleft(node)

    def pop(self) -> Node:
        """Remove and return the top node; raise IndexError when empty."""
        if not self._nodes:
            raise IndexError("pop from an empty stack")
        return self._nodes.popleft()

    def append(self, node: Node) -> None:
        """Put a node at the bottom of the stack."""
        self._nodes.append(node)

    def swap(self) -> None:
        """Exchange the contents of the two top nodes; no-op below two nodes."""
        if len(self._nodes) < 2:
            return
        first, second = self._nodes[0], self._nodes[1]
        first.value, second.value = second.value, first.value
        first.index, second.index = second.index, first.index

    def rotate(self) -> None:
        """Move the top node to the bottom; no-op below two nodes."""
        if len(self._nodes) >= 2:
            self._nodes.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom node to the top; no-op below two nodes."""
        if len(self._nodes) >= 2:
            self._nodes.rotate(1)

    def is_sorted(self) -> bool:
        """True when indexes never decrease from top to bottom."""
        return all(
            upper.index <= lower.index
            for upper, lower in zip(self._nodes, list(self._nodes)[1:])
        )

    def min_value(self) -> int:
        """Smallest value, or 0 for an empty stack."""
        return min((node.value for node in self._nodes), default=0)

    def max_value(self) -> int:
        """Largest value, or 0 for an empty stack."""
        return max((node.value for node in self._nodes), default=0)

    def min_index(self) -> int:
        """Smallest index, or 0 for an empty stack."""
        return min((node.index for node in self._nodes), default=0)

    def max_index(self) -> int:
        """Largest index, or 0 for an empty stack."""
        return max((node.index for node in self._nodes), default=0)

    def position(self, index: int) -> int:
        """Distance from the top of the node holding ``index``.

        Raises ValueError when no node holds it.
        """
        for position, node in enumerate(self._nodes):
            if node.index == index:
                return position
        raise ValueError(f"no node with index {index}")

    def assign_indexes(self) -> None:
        """Give every node the number of values strictly smaller than its own."""
        ordered = sorted(node.value for node in self._nodes)
        ranks: dict[int, int] = {}
        for rank, value in enumerate(ordered):
            ranks.setdefault(value, rank)
        for node in self._nodes:
            node.index = ranks[node.value]

    def disorder(self) -> float:
        """Share of node pairs whose indexes are out of order, from 0.0 to 1.0."""
        pairs = list(combinations((node.index for node in self._nodes), 2))
        if not pairs:
            return 0.0
        mistakes = sum(1 for upper, lower in pairs if upper > lower)
        return mistakes / len(pairs)

    def has_duplicate(self) -> bool:
        """True when two nodes hold the same value."""
        values = self.values()
        return len(set(values)) != len(values)

    def values(self) -> list[int]:
        """Node values from top to bottom."""
        return [node.value for node in self._nodes]

    def indexes(self) -> list[int]:
        """Node indexes from top to bottom."""
        return [node.index for node in self._nodes]