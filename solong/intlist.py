"""A singly linked list of integers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """One link of an :class:`IntList`."""

    value: int
    next: Optional["Node"] = None


class IntList:
    """A singly linked list of integers with cheap insertion at both ends."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: int) -> None:
        """Insert ``value`` before the first element."""
        node = Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Append ``value`` after the last element."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Optional[int]:
        """Value of the last element, or None when the list is empty."""
        return None if self._tail is None else self._tail.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"IntList({list(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntList):
            return NotImplemented
        return len(self) == len(other) and list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def for_each(self, func: Callable[[int], object]) -> None:
        """Call ``func`` on every value, front to back."""
        for value in self:
            func(value)

    def map(self, func: Callable[[int], int]) -> "IntList":
        """Return a new list holding ``func`` applied to every value."""
        return IntList(func(value) for value in self)

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._tail = None
        self._size = 0