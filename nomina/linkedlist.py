"""A singly linked list with the operations the payroll tools rely on."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from itertools import islice
from typing import Any, Callable, Iterable, Iterator, Optional

ASCENDING = 1
DESCENDING = 0


@dataclass(slots=True)
class _Node:
    element: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Ordered collection stored as a chain of nodes.

    Indexes run from ``0`` to ``len(self) - 1``; negative indexes are
    rejected rather than counted from the end.
    """

    __slots__ = ("_head", "_size")

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        tail: Optional[_Node] = None
        for element in iterable:
            node = _Node(element)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.element

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __getitem__(self, index: int) -> Any:
        return self._node_at(index).element

    def __setitem__(self, index: int, element: Any) -> None:
        self._node_at(index).element = element

    def __delitem__(self, index: int) -> None:
        self._unlink(index)

    def __contains__(self, element: Any) -> bool:
        return any(item is element or item == element for item in self)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _checked_index(self, index: int, upper: int) -> int:
        index = operator.index(index)
        if not 0 <= index <= upper:
            raise IndexError(f"index {index} out of range for length {self._size}")
        return index

    def _node_at(self, index: int) -> _Node:
        index = self._checked_index(index, self._size - 1)
        return next(islice(self._nodes(), index, None))

    def _unlink(self, index: int) -> Any:
        index = self._checked_index(index, self._size - 1)
        if index == 0:
            node = self._head
            self._head = node.next
        else:
            previous = self._node_at(index - 1)
            node = previous.next
            previous.next = node.next
        self._size -= 1
        return node.element

    def append(self, element: Any) -> None:
        """Add ``element`` at the end of the list."""
        self.insert(self._size, element)

    def insert(self, index: int, element: Any) -> None:
        """Place ``element`` at ``index``, which may equal the length."""
        index = self._checked_index(index, self._size)
        if index == 0:
            self._head = _Node(element, self._head)
        else:
            previous = self._node_at(index - 1)
            previous.next = _Node(element, previous.next)
        self._size += 1

    def pop(self, index: int) -> Any:
        """Remove the element at ``index`` and return it."""
        return self._unlink(index)

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._size = 0

    def index(self, element: Any) -> int:
        """Return the position of the first occurrence of ``element``."""
        for position, item in enumerate(self):
            if item is element or item == element:
                return position
        raise ValueError(f"{element!r} is not in the list")

    def is_empty(self) -> bool:
        return self._size == 0

    def contains_all(self, other: Iterable[Any]) -> bool:
        """Tell whether every element of ``other`` is in this list."""
        return all(element in self for element in other)

    def sublist(self, start: int, stop: int) -> "LinkedList":
        """Return a new list with the elements from ``start`` up to ``stop``."""
        start = operator.index(start)
        stop = operator.index(stop)
        if start < 0 or stop > self._size:
            raise IndexError(
                f"range {start}:{stop} out of bounds for length {self._size}"
            )
        if stop <= start:
            return type(self)()
        return type(self)(islice(self, start, stop))

    def clone(self) -> "LinkedList":
        """Return a shallow copy."""
        return self.sublist(0, self._size)

    def sort(self, compare: Callable[[Any, Any], int], order: int) -> None:
        """Sort in place with a three-way ``compare`` function.

        ``order`` is 1 for ascending and 0 for descending.
        """
        if compare is None or not callable(compare):
            raise TypeError("compare must be a callable")
        if order not in (ASCENDING, DESCENDING):
            raise ValueError("order must be 1 (ascending) or 0 (descending)")
        for outer in self._nodes():
            inner = outer.next
            while inner is not None:
                result = compare(outer.element, inner.element)
                if (order == ASCENDING and result >= 1) or (
                    order == DESCENDING and result <= -1
                ):
                    outer.element, inner.element = inner.element, outer.element
                inner = inner.next