"""Constant-time moves and swaps of elements within a doubly linked list or slice."""

from __future__ import annotations

from idxlist.col import BACK, FRONT, OOB, NodeIdx
from idxlist.doubly_mut import DoublyMutView
from idxlist.doubly_view import DoublySlice
from idxlist.ranges import link


class DoublyMovable(DoublyMutView):
    """A doubly linked sequence whose elements can be relocated by index."""

    def move_next_to(self, idx: NodeIdx, idx_target: NodeIdx) -> None:
        """Move the element at ``idx`` right after the one at ``idx_target``.

        Raises InvalidIndexError if either index is invalid.
        """
        col = self._col
        mid = col.try_get_ptr(idx)
        prev = col.try_get_ptr(idx_target)
        if mid == prev:
            return

        nxt = col.node(prev).next
        old_next = col.node(mid).next
        old_prev = col.node(mid).prev

        # close the gap left by the moved node
        if old_prev is not None and old_prev == prev:
            return
        if old_prev is not None and old_next is not None:
            link(col, old_prev, old_next)
        elif old_prev is not None:
            col.node(old_prev).next = None
            col.ends[BACK] = old_prev
        elif old_next is not None:
            col.node(old_next).prev = None
            col.ends[FRONT] = old_next
        else:
            return

        # place the node at its new position
        if nxt is None:
            col.node(mid).next = None
        else:
            link(col, mid, nxt)
        link(col, prev, mid)

        ends = self.ends
        old_front = ends[FRONT]
        old_back = ends[BACK]

        if old_back is not None:
            if old_back == prev:
                ends[BACK] = mid
            elif old_back == mid and mid != old_front:
                ends[BACK] = old_prev

        if old_front is not None and old_front == mid and old_front != old_back:
            ends[FRONT] = old_next

    def move_prev_to(self, idx: NodeIdx, idx_target: NodeIdx) -> None:
        """Move the element at ``idx`` right before the one at ``idx_target``.

        Raises InvalidIndexError if either index is invalid.
        """
        col = self._col
        mid = col.try_get_ptr(idx)
        nxt = col.try_get_ptr(idx_target)
        if mid == nxt:
            return

        prev = col.node(nxt).prev
        old_next = col.node(mid).next
        old_prev = col.node(mid).prev

        # close the gap left by the moved node
        if old_next is not None and old_next == nxt:
            return
        if old_prev is not None and old_next is not None:
            link(col, old_prev, old_next)
        elif old_prev is not None:
            col.node(old_prev).next = None
            col.ends[BACK] = old_prev
        elif old_next is not None:
            col.node(old_next).prev = None
            col.ends[FRONT] = old_next
        else:
            return

        # place the node at its new position
        if prev is None:
            col.node(mid).prev = None
        else:
            link(col, prev, mid)
        link(col, mid, nxt)

        ends = self.ends
        old_front = ends[FRONT]
        old_back = ends[BACK]

        if old_front is not None:
            if old_front == nxt:
                ends[FRONT] = mid
            elif old_front == mid and mid != old_back:
                ends[FRONT] = old_next

        if old_back is not None and old_back == mid and old_front != old_back:
            ends[BACK] = old_prev

    def move_to_front(self, idx: NodeIdx) -> None:
        """Move the element at ``idx`` to the front.

        Raises IndexError if empty and InvalidIndexError if ``idx`` is invalid.
        """
        ptr = self.ends[FRONT]
        if ptr is None:
            raise IndexError(OOB)
        self.move_prev_to(idx, self._col.ptr_to_idx(ptr))

    def move_to_back(self, idx: NodeIdx) -> None:
        """Move the element at ``idx`` to the back.

        Raises IndexError if empty and InvalidIndexError if ``idx`` is invalid.
        """
        ptr = self.ends[BACK]
        if ptr is None:
            raise IndexError(OOB)
        self.move_next_to(idx, self._col.ptr_to_idx(ptr))

    def swap(self, idx_a: NodeIdx, idx_b: NodeIdx) -> None:
        """Swap the positions of the elements at ``idx_a`` and ``idx_b``.

        Raises InvalidIndexError if either index is invalid.
        """
        col = self._col
        a = col.try_get_ptr(idx_a)
        b = col.try_get_ptr(idx_b)
        if a == b:
            return

        p_a = col.node(a).prev
        p_b = col.node(b).prev
        n_a = col.node(a).next
        n_b = col.node(b).next

        if n_a is not None and n_a == b:
            self.move_next_to(idx_a, idx_b)
            return
        if n_b is not None and n_b == a:
            self.move_next_to(idx_b, idx_a)
            return

        if p_a is None:
            col.node(b).prev = None
        else:
            link(col, p_a, b)

        if p_b is None:
            col.node(a).prev = None
        else:
            link(col, p_b, a)

        if n_a is None:
            col.node(b).next = None
        else:
            link(col, b, n_a)

        if n_b is None:
            col.node(a).next = None
        else:
            link(col, a, n_b)

        swapped = {a: b, b: a}
        ends = self.ends
        custom_front = swapped.get(ends[FRONT]) if ends[FRONT] is not None else None
        custom_back = swapped.get(ends[BACK]) if ends[BACK] is not None else None

        for end in (FRONT, BACK):
            current = col.ends[end]
            if current is not None and current in swapped:
                col.ends[end] = swapped[current]

        if custom_front is not None:
            ends[FRONT] = custom_front
        if custom_back is not None:
            ends[BACK] = custom_back


class DoublySliceMut(DoublyMovable, DoublySlice):
    """A mutable view of consecutive elements of a doubly linked storage."""

    def __init__(self, col, front, back) -> None:
        DoublySlice.__init__(self, col, front, back)