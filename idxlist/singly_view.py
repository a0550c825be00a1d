"""Read access to a list with a single end, the front."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from idxlist.col import FRONT, InvalidIndexError, LinkedListBase, NodeIdx, NodeIdxError


class SinglyView(LinkedListBase):
    """A forward-linked sequence whose front is the storage's front."""

    def _ptrs(self) -> Iterator[int]:
        ptr = self._col.ends[FRONT]
        while ptr is not None:
            yield ptr
            ptr = self._col.node(ptr).next

    def __iter__(self) -> Iterator[Any]:
        for ptr in self._ptrs():
            yield self._col.node(ptr).data

    def indices(self) -> Iterator[NodeIdx]:
        """Yield the index of every element from front to back."""
        for ptr in self._ptrs():
            yield self._col.ptr_to_idx(ptr)

    def front(self) -> Any:
        """Return the front element, or None if empty."""
        ptr = self._col.ends[FRONT]
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