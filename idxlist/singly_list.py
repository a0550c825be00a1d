"""A forward-linked list whose elements are reachable in constant time by index."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from idxlist.col import FRONT, OOB, MemoryPolicy, NodeIdx
from idxlist.singly_view import SinglyView


class SinglyList(SinglyView):
    """Singly linked list owning its nodes.

    Indices returned by ``push_front`` stay valid until their node is removed
    or the nodes are reorganized to reclaim memory.
    """

    def __init__(
        self,
        iterable: Iterable[Any] | None = None,
        policy: MemoryPolicy = MemoryPolicy.AUTO,
    ) -> None:
        super().__init__(policy)
        tail: int | None = None
        for value in iterable or ():
            ptr = self._col.push(value)
            if tail is None:
                self._col.ends[FRONT] = ptr
            else:
                self._col.node(tail).next = ptr
            tail = ptr

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push_front(self, value: Any) -> NodeIdx:
        """Insert ``value`` at the front and return its index."""
        ptr = self._col.push(value)
        self._col.node(ptr).next = self._col.ends[FRONT]
        self._col.ends[FRONT] = ptr
        return self._col.ptr_to_idx(ptr)

    def pop_front(self) -> Any:
        """Remove and return the front element, or None if the list is empty."""
        ptr = self._col.ends[FRONT]
        if ptr is None:
            return None
        self._col.ends[FRONT] = self._col.node(ptr).next
        return self._col.close_and_reclaim(ptr)

    def clear(self) -> None:
        """Remove every element; all indices become invalid."""
        self._col.clear()

    def reclaim_closed_nodes(self) -> None:
        """Drop the storage of removed elements, possibly invalidating indices."""
        self._col.reclaim_closed_nodes()

    def set_front_value(self, value: Any) -> None:
        """Replace the front element; raise IndexError if the list is empty."""
        ptr = self._col.ends[FRONT]
        if ptr is None:
            raise IndexError(OOB)
        self._col.node(ptr).data = value

    def set(self, idx: NodeIdx, value: Any) -> bool:
        """Replace the element at ``idx``; return False if the index is invalid."""
        node = self._col.node_from_idx(idx)
        if node is None:
            return False
        node.data = value
        return True

    def try_set(self, idx: NodeIdx, value: Any) -> None:
        """Replace the element at ``idx``; raise InvalidIndexError if invalid."""
        self._col.node(self._col.try_get_ptr(idx)).data = value

    def next_idx_of(self, idx: NodeIdx) -> NodeIdx | None:
        """Return the index following ``idx``, or None at the back.

        Raises InvalidIndexError if ``idx`` is invalid.
        """
        ptr = self._col.try_get_ptr(idx)
        next_ptr = self._col.node(ptr).next
        return None if next_ptr is None else self._col.ptr_to_idx(next_ptr)

    def next_of(self, idx: NodeIdx) -> Any:
        """Return the element following ``idx``, or None at the back."""
        next_idx = self.next_idx_of(idx)
        return None if next_idx is None else self.get(next_idx)

    def set_next_of(self, idx: NodeIdx, value: Any) -> bool:
        """Replace the element following ``idx``; return False if ``idx`` is the back."""
        next_idx = self.next_idx_of(idx)
        return next_idx is not None and self.set(next_idx, value)