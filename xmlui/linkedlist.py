"""A double-ended list whose entries carry an integer id alongside their item."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    node_id: int
    item: T


class LinkedList(Generic[T]):
    """Ordered collection with cheap pushes and pops at both ends.

    Every entry has an id. Ids given explicitly are stored as-is; entries
    pushed without one receive the next free id, counting up from zero.
    """

    def __init__(self) -> None:
        self._nodes: deque[_Node[T]] = deque()
        self._next_free_id = 0

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[T]:
        return (node.item for node in self._nodes)

    def __contains__(self, item: object) -> bool:
        return any(node.item == item for node in self._nodes)

    def __repr__(self) -> str:
        entries = ", ".join(f"{node.node_id}: {node.item!r}" for node in self._nodes)
        return f"LinkedList([{entries}])"

    def first(self) -> T | None:
        """Return the item at the front, or None if the list is empty."""
        return self._nodes[0].item if self._nodes else None

    def last(self) -> T | None:
        """Return the item at the back, or None if the list is empty."""
        return self._nodes[-1].item if self._nodes else None

    def _take_id(self, node_id: int | None) -> int:
        if node_id is not None:
            return node_id
        taken = self._next_free_id
        self._next_free_id += 1
        return taken

    def push_back(self, item: T, node_id: int | None = None) -> None:
        """Append ``item`` at the back, with ``node_id`` or the next free id."""
        self._nodes.append(_Node(self._take_id(node_id), item))

    def push_front(self, item: T, node_id: int | None = None) -> None:
        """Insert ``item`` at the front, with ``node_id`` or the next free id."""
        self._nodes.appendleft(_Node(self._take_id(node_id), item))

    def pop_back(self) -> T:
        """Remove and return the item at the back."""
        if not self._nodes:
            raise IndexError("pop from an empty LinkedList")
        return self._nodes.pop().item

    def pop_front(self) -> T:
        """Remove and return the item at the front."""
        if not self._nodes:
            raise IndexError("pop from an empty LinkedList")
        return self._nodes.popleft().item

    def pop(self, item: T) -> T:
        """Remove and return the first entry equal to ``item``."""
        for node in self._nodes:
            if node.item == item:
                self._nodes.remove(node)
                return node.item
        raise ValueError(f"{item!r} is not in the list")

    def pop_by_id(self, node_id: int) -> T:
        """Remove and return the first entry with id ``node_id``."""
        for node in self._nodes:
            if node.node_id == node_id:
                self._nodes.remove(node)
                return node.item
        raise KeyError(node_id)

    def get_by_id(self, node_id: int) -> T | None:
        """Return the item of the first entry with id ``node_id``, or None."""
        return next(
            (node.item for node in self._nodes if node.node_id == node_id), None
        )

    def items_with_ids(self) -> Iterator[tuple[int, T]]:
        """Yield ``(id, item)`` pairs from front to back."""
        return ((node.node_id, node.item) for node in self._nodes)