"""A doubly linked list whose elements are reachable in constant time by index."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from idxlist.col import BACK, FRONT, MemoryPolicy, NodeIdx
from idxlist.doubly_moves import DoublyMovable, DoublySliceMut
from idxlist.doubly_view import DoublySlice
from idxlist.ranges import link, slice_ends


class DoublyList(DoublyMovable):
    """Doubly linked list owning its nodes.

    Indices returned by the growth methods stay valid until their node is
    removed or the nodes are reorganized to reclaim memory.
    """

    def __init__(
        self,
        iterable: Iterable[Any] | None = None,
        policy: MemoryPolicy = MemoryPolicy.AUTO,
    ) -> None:
        super().__init__(policy)
        for value in iterable or ():
            self.push_back(value)

    # growth

    def push_back(self, value: Any) -> NodeIdx:
        """Append ``value`` at the back and return its index."""
        col = self._col
        ptr = col.push(value)
        back = col.ends[BACK]
        if back is None:
            col.ends[FRONT] = ptr
        else:
            link(col, back, ptr)
        col.ends[BACK] = ptr
        return col.ptr_to_idx(ptr)

    def push_front(self, value: Any) -> NodeIdx:
        """Insert ``value`` at the front and return its index."""
        col = self._col
        ptr = col.push(value)
        front = col.ends[FRONT]
        if front is None:
            col.ends[BACK] = ptr
        else:
            link(col, ptr, front)
        col.ends[FRONT] = ptr
        return col.ptr_to_idx(ptr)

    def _insert_after(self, prev: int, value: Any) -> NodeIdx:
        col = self._col
        nxt = col.node(prev).next
        ptr = col.push(value)
        link(col, prev, ptr)
        if nxt is None:
            col.ends[BACK] = ptr
        else:
            link(col, ptr, nxt)
        return col.ptr_to_idx(ptr)

    def _insert_before(self, nxt: int, value: Any) -> NodeIdx:
        col = self._col
        prev = col.node(nxt).prev
        ptr = col.push(value)
        link(col, ptr, nxt)
        if prev is None:
            col.ends[FRONT] = ptr
        else:
            link(col, prev, ptr)
        return col.ptr_to_idx(ptr)

    def insert_next_to(self, idx: NodeIdx, value: Any) -> NodeIdx:
        """Insert ``value`` right after ``idx``; raise InvalidIndexError if invalid."""
        return self._insert_after(self._col.try_get_ptr(idx), value)

    def insert_prev_to(self, idx: NodeIdx, value: Any) -> NodeIdx:
        """Insert ``value`` right before ``idx``; raise InvalidIndexError if invalid."""
        return self._insert_before(self._col.try_get_ptr(idx), value)

    def try_insert_next_to(self, idx: NodeIdx, value: Any) -> NodeIdx | None:
        """Insert ``value`` right after ``idx``; return None, unchanged, if invalid."""
        if not self.is_valid(idx):
            return None
        return self._insert_after(idx.ptr, value)

    def try_insert_prev_to(self, idx: NodeIdx, value: Any) -> NodeIdx | None:
        """Insert ``value`` right before ``idx``; return None, unchanged, if invalid."""
        if not self.is_valid(idx):
            return None
        return self._insert_before(idx.ptr, value)

    # removal

    def _unlink_and_close(self, ptr: int) -> Any:
        col = self._col
        node = col.node(ptr)
        prev, nxt = node.prev, node.next

        if prev is None:
            col.ends[FRONT] = nxt
        else:
            col.node(prev).next = nxt

        if nxt is None:
            col.ends[BACK] = prev
        else:
            col.node(nxt).prev = prev

        return col.close_and_reclaim(ptr)

    def pop_front(self) -> Any:
        """Remove and return the front element, or None if the list is empty."""
        ptr = self._col.ends[FRONT]
        return None if ptr is None else self._unlink_and_close(ptr)

    def pop_back(self) -> Any:
        """Remove and return the back element, or None if the list is empty."""
        ptr = self._col.ends[BACK]
        return None if ptr is None else self._unlink_and_close(ptr)

    def remove(self, idx: NodeIdx) -> Any:
        """Remove and return the element at ``idx``; raise InvalidIndexError if invalid."""
        return self._unlink_and_close(self._col.try_get_ptr(idx))

    def try_remove(self, idx: NodeIdx) -> Any:
        """Remove and return the element at ``idx``; return None, unchanged, if invalid."""
        if not self.is_valid(idx):
            return None
        return self._unlink_and_close(idx.ptr)

    def clear(self) -> None:
        """Remove every element; all indices become invalid."""
        self._col.clear()

    def reclaim_closed_nodes(self) -> None:
        """Drop the storage of removed elements, possibly invalidating indices."""
        self._col.reclaim_closed_nodes()

    # slicing

    def _slice_ptrs(
        self, start: NodeIdx | None, end: NodeIdx | None, include_end: bool
    ) -> tuple[int | None, int | None]:
        return slice_ends(self._col, self._col.ends[BACK], start, end, include_end)

    def slice(
        self,
        start: NodeIdx | None = None,
        end: NodeIdx | None = None,
        include_end: bool = False,
    ) -> DoublySlice:
        """Return a read-only view from ``start`` to ``end``.

        A missing ``start`` means the front and a missing ``end`` the back.
        If ``end`` comes before ``start`` the slice runs to the back.
        Raises InvalidIndexError for an invalid bound.
        """
        front, back = self._slice_ptrs(start, end, include_end)
        return DoublySlice(self._col, front, back)

    def slice_mut(
        self,
        start: NodeIdx | None = None,
        end: NodeIdx | None = None,
        include_end: bool = False,
    ) -> DoublySliceMut:
        """Return a mutable view from ``start`` to ``end``; bounds as in ``slice``."""
        front, back = self._slice_ptrs(start, end, include_end)
        return DoublySliceMut(self._col, front, back)