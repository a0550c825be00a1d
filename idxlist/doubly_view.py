"""Read access to a list or slice with two ends, front and back."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from idxlist.col import (
    BACK,
    FRONT,
    InvalidIndexError,
    LinkedListBase,
    NodeIdx,
    NodeIdxError,
    SelfRefCol,
)


class DoublyView(LinkedListBase):
    """A doubly linked sequence running from its front to its back.

    A list's ends are those of its storage; a slice keeps its own ends
    within a shared storage.
    """

    @property
    def ends(self) -> list[int | None]:
        """The mutable ``[front, back]`` pointers of this view."""
        return self._col.ends

    def _ptrs(self) -> Iterator[int]:
        ptr = self.ends[FRONT]
        back = self.ends[BACK]
        while ptr is not None:
            yield ptr
            if ptr == back:
                return
            ptr = self._col.node(ptr).next

    def __iter__(self) -> Iterator[Any]:
        for ptr in self._ptrs():
            yield self._col.node(ptr).data

    def __len__(self) -> int:
        if self.ends is self._col.ends:
            return len(self._col)
        return sum(1 for _ in self._ptrs())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def is_empty(self) -> bool:
        return self.ends[FRONT] is None

    def indices(self) -> Iterator[NodeIdx]:
        """Yield the index of every element from front to back."""
        for ptr in self._ptrs():
            yield self._col.ptr_to_idx(ptr)

    def front(self) -> Any:
        """Return the front element, or None if empty."""
        ptr = self.ends[FRONT]
        return None if ptr is None else self._col.node(ptr).data

    def back(self) -> Any:
        """Return the back element, or None if empty."""
        ptr = self.ends[BACK]
        return None if ptr is None else self._col.node(ptr).data

    def idx_err(self, idx: NodeIdx) -> NodeIdxError | None:
        """Return why ``idx`` is invalid, or None if it is valid."""
        try:
            self._col.try_get_ptr(idx)
        except InvalidIndexError as exc:
            return exc.reason
        return None

    def is_valid(self, idx: NodeIdx) -> bool:
        return self.idx_err(idx) is None

    def get(self, idx: NodeIdx) -> Any:
        """Return the element at ``idx``, or None if the index is invalid."""
        node = self._col.node_from_idx(idx)
        return None if node is None else node.data

    def try_get(self, idx: NodeIdx) -> Any:
        """Return the element at ``idx``; raise InvalidIndexError if invalid."""
        return self._col.node(self._col.try_get_ptr(idx)).data

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

    def prev_idx_of(self, idx: NodeIdx) -> NodeIdx | None:
        """Return the index preceding ``idx``, or None at the front.

        Raises InvalidIndexError if ``idx`` is invalid.
        """
        ptr = self._col.try_get_ptr(idx)
        prev_ptr = self._col.node(ptr).prev
        return None if prev_ptr is None else self._col.ptr_to_idx(prev_ptr)

    def prev_of(self, idx: NodeIdx) -> Any:
        """Return the element preceding ``idx``, or None at the front."""
        prev_idx = self.prev_idx_of(idx)
        return None if prev_idx is None else self.get(prev_idx)


class DoublySlice(DoublyView):
    """A read-only view of consecutive elements of a doubly linked storage."""

    def __init__(self, col: SelfRefCol, front: int | None, back: int | None) -> None:
        self._col = col
        if front is None or back is None:
            front = back = None
        self._slice_ends: list[int | None] = [front, back]

    @property
    def ends(self) -> list[int | None]:
        return self._slice_ends