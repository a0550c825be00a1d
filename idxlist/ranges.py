"""Link maintenance and range resolution for doubly linked storage."""

from __future__ import annotations

from idxlist.col import FRONT, NodeIdx, SelfRefCol


def is_linked(col: SelfRefCol, prev: int, next: int) -> bool:
    """Return whether ``prev`` and ``next`` are linked in both directions."""
    return col.node(prev).next == next and col.node(next).prev == prev


def link(col: SelfRefCol, prev: int, next: int) -> None:
    """Make ``next`` follow ``prev``."""
    col.node(prev).next = next
    col.node(next).prev = prev


def unlink(col: SelfRefCol, prev: int, next: int) -> None:
    """Remove the link between ``prev`` and ``next``; raise ValueError if absent."""
    if not is_linked(col, prev, next):
        raise ValueError("the nodes are not linked")
    col.node(prev).next = None
    col.node(next).prev = None


def slice_ends(
    col: SelfRefCol,
    view_back: int | None,
    start: NodeIdx | None,
    end: NodeIdx | None,
    include_end: bool,
) -> tuple[int | None, int | None]:
    """Resolve a range of indices into the (front, back) pointers of a slice.

    ``start`` is inclusive; None means the front of the storage. ``end`` is
    inclusive when ``include_end`` is true; None means ``view_back``. An empty
    slice is ``(None, None)``. Raises InvalidIndexError for an invalid bound.
    """
    front = col.ends[FRONT] if start is None else col.try_get_ptr(start)
    if front is None:
        return None, None

    if end is None:
        back = view_back
    else:
        ptr = col.try_get_ptr(end)
        if include_end:
            back = ptr
        elif ptr == front:
            back = None
        else:
            back = col.node(ptr).prev

    if back is None:
        return None, None
    return front, back