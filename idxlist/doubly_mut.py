"""Mutation of elements and links of a list or slice with two ends."""

from __future__ import annotations

from typing import Any

from idxlist.col import BACK, FRONT, OOB, NodeIdx
from idxlist.doubly_view import DoublyView
from idxlist.ranges import link, unlink


class DoublyMutView(DoublyView):
    """A doubly linked sequence whose elements and links can be changed."""

    def set_front_value(self, value: Any) -> None:
        """Replace the front element; raise IndexError if empty."""
        ptr = self.ends[FRONT]
        if ptr is None:
            raise IndexError(OOB)
        self._col.node(ptr).data = value

    def set_back_value(self, value: Any) -> None:
        """Replace the back element; raise IndexError if empty."""
        ptr = self.ends[BACK]
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

    def set_next_of(self, idx: NodeIdx, value: Any) -> bool:
        """Replace the element following ``idx``; return False if ``idx`` is the back.

        Raises InvalidIndexError if ``idx`` is invalid.
        """
        next_idx = self.next_idx_of(idx)
        return next_idx is not None and self.set(next_idx, value)

    def set_prev_of(self, idx: NodeIdx, value: Any) -> bool:
        """Replace the element preceding ``idx``; return False if ``idx`` is the front.

        Raises InvalidIndexError if ``idx`` is invalid.
        """
        prev_idx = self.prev_idx_of(idx)
        return prev_idx is not None and self.set(prev_idx, value)

    def reverse(self) -> None:
        """Reverse the elements between this view's front and back in place."""
        front = self.ends[FRONT]
        if front is None:
            return
        back = self.ends[BACK]
        if front == back:
            return

        col = self._col
        new_next_of_front = col.node(back).next
        new_prev_of_back = col.node(front).prev

        prev = front
        upcoming = col.node(prev).next
        while upcoming is not None:
            current = upcoming
            upcoming = col.node(current).next
            link(col, current, prev)
            prev = current
            if prev == back:
                break

        if new_next_of_front is None:
            col.node(front).next = None
        else:
            link(col, front, new_next_of_front)

        if new_prev_of_back is None:
            col.node(back).prev = None
        else:
            link(col, new_prev_of_back, back)

        old_col_front = col.ends[FRONT]
        old_col_back = col.ends[BACK]

        self.ends[FRONT] = back
        self.ends[BACK] = front

        if front == old_col_front:
            col.ends[FRONT] = back
        if back == old_col_back:
            col.ends[BACK] = front

    # Low-level link editing: each call alone may break the list's structure;
    # callers combine them into a consistent rearrangement.

    def add_link(self, a: NodeIdx, b: NodeIdx) -> None:
        """Make ``b`` follow ``a``; raise InvalidIndexError if either is invalid."""
        prev = self._col.try_get_ptr(a)
        nxt = self._col.try_get_ptr(b)
        link(self._col, prev, nxt)

    def remove_link(self, a: NodeIdx, b: NodeIdx) -> None:
        """Remove the link from ``a`` to ``b``.

        Raises InvalidIndexError for an invalid index and ValueError if the
        nodes are not linked.
        """
        prev = self._col.try_get_ptr(a)
        nxt = self._col.try_get_ptr(b)
        unlink(self._col, prev, nxt)

    def set_front(self, new_front: NodeIdx) -> None:
        """Make ``new_front`` the front of the storage."""
        self._col.ends[FRONT] = self._col.try_get_ptr(new_front)

    def set_back(self, new_back: NodeIdx) -> None:
        """Make ``new_back`` the back of the storage."""
        self._col.ends[BACK] = self._col.try_get_ptr(new_back)