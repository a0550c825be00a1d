"""Node storage shared by lists and views: validated indices and memory reclaiming."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

FRONT = 0
BACK = 1

IDX_ERR = "invalid node index"
OOB = "the list is empty"


class NodeIdxError(Enum):
    """Reason why a node index cannot be used on a collection."""

    REMOVED_NODE = "the node has been removed"
    OUT_OF_BOUNDS = "the index does not point to a node of the collection"
    REORGANIZED_COLLECTION = "the nodes have been reorganized since the index was created"


class InvalidIndexError(LookupError):
    """Raised when a node index is used that is no longer (or never was) valid."""

    def __init__(self, reason: NodeIdxError) -> None:
        super().__init__(f"{IDX_ERR}: {reason.value}")
        self.reason = reason


class MemoryPolicy(Enum):
    """When closed nodes are reclaimed.

    AUTO reclaims on removal once more than a quarter of the nodes are closed;
    LAZY reclaims only on an explicit call to ``reclaim_closed_nodes``.
    """

    AUTO = "auto"
    LAZY = "lazy"


@dataclass(frozen=True)
class MemoryState:
    """Key of the node layout; it changes whenever nodes are moved."""

    generation: int = 0


@dataclass(frozen=True)
class Utilization:
    """Counts of active and closed nodes in the storage."""

    num_active_nodes: int
    num_closed_nodes: int

    @property
    def total(self) -> int:
        return self.num_active_nodes + self.num_closed_nodes

    @property
    def ratio(self) -> float:
        """Fraction of stored nodes that are active (1.0 when nothing is stored)."""
        return 1.0 if self.total == 0 else self.num_active_nodes / self.total


@dataclass(frozen=True)
class NodeIdx:
    """Handle to a node, valid while the node lives and the layout is unchanged."""

    state: MemoryState
    ptr: int
    owner: Any = field(repr=False)


@dataclass(eq=False)
class Node:
    """A stored element together with its links."""

    data: Any
    prev: int | None = None
    next: int | None = None
    active: bool = True


class SelfRefCol:
    """Vector of linked nodes with the collection's ends."""

    def __init__(self, policy: MemoryPolicy = MemoryPolicy.AUTO) -> None:
        self.policy = policy
        self.ends: list[int | None] = [None, None]
        self._nodes: list[Node] = []
        self._num_active = 0
        self._generation = 0

    def __len__(self) -> int:
        return self._num_active

    def memory_state(self) -> MemoryState:
        return MemoryState(self._generation)

    def utilization(self) -> Utilization:
        return Utilization(self._num_active, len(self._nodes) - self._num_active)

    def push(self, value: Any) -> int:
        """Store a new unlinked node and return its pointer."""
        self._nodes.append(Node(value))
        self._num_active += 1
        return len(self._nodes) - 1

    def node(self, ptr: int) -> Node:
        return self._nodes[ptr]

    def try_get_ptr(self, idx: NodeIdx) -> int:
        """Return the pointer of a valid index; raise InvalidIndexError otherwise."""
        if idx.owner is not self:
            raise InvalidIndexError(NodeIdxError.OUT_OF_BOUNDS)
        if idx.state.generation != self._generation:
            raise InvalidIndexError(NodeIdxError.REORGANIZED_COLLECTION)
        if not 0 <= idx.ptr < len(self._nodes):
            raise InvalidIndexError(NodeIdxError.OUT_OF_BOUNDS)
        if not self._nodes[idx.ptr].active:
            raise InvalidIndexError(NodeIdxError.REMOVED_NODE)
        return idx.ptr

    def node_from_idx(self, idx: NodeIdx) -> Node | None:
        try:
            return self._nodes[self.try_get_ptr(idx)]
        except InvalidIndexError:
            return None

    def ptr_to_idx(self, ptr: int) -> NodeIdx:
        return NodeIdx(self.memory_state(), ptr, self)

    def close_and_reclaim(self, ptr: int) -> Any:
        """Close the node at ``ptr``, return its value and reclaim memory per policy."""
        node = self._nodes[ptr]
        if not node.active:
            raise InvalidIndexError(NodeIdxError.REMOVED_NODE)
        value = node.data
        node.data = None
        node.prev = None
        node.next = None
        node.active = False
        self._num_active -= 1

        closed = len(self._nodes) - self._num_active
        if self.policy is MemoryPolicy.AUTO and closed * 4 > len(self._nodes):
            self.reclaim_closed_nodes()
        return value

    def reclaim_closed_nodes(self) -> None:
        """Drop closed nodes, moving active ones; the memory state changes if any moved."""
        if self._num_active == len(self._nodes):
            return
        mapping: dict[int, int] = {}
        kept: list[Node] = []
        for old, node in enumerate(self._nodes):
            if node.active:
                mapping[old] = len(kept)
                kept.append(node)

        def remap(ptr: int | None) -> int | None:
            return None if ptr is None else mapping[ptr]

        for node in kept:
            node.prev = remap(node.prev)
            node.next = remap(node.next)
        self.ends = [remap(ptr) for ptr in self.ends]
        self._nodes = kept
        if any(old != new for old, new in mapping.items()):
            self._generation += 1

    def clear(self) -> None:
        self._nodes = []
        self._num_active = 0
        self.ends = [None, None]

    def iter_active(self) -> Iterator[Any]:
        """Yield the values of active nodes in storage order."""
        return (node.data for node in self._nodes if node.active)


class LinkedListBase:
    """Common queries of lists owning a node storage."""

    def __init__(self, policy: MemoryPolicy = MemoryPolicy.AUTO) -> None:
        self._col = SelfRefCol(policy)

    @property
    def col(self) -> SelfRefCol:
        return self._col

    def __len__(self) -> int:
        return len(self._col)

    def is_empty(self) -> bool:
        return len(self._col) == 0

    def memory_state(self) -> MemoryState:
        return self._col.memory_state()

    def node_utilization(self) -> Utilization:
        return self._col.utilization()

    def iter_x(self) -> Iterator[Any]:
        """Iterate over the elements in arbitrary (storage) order."""
        return self._col.iter_active()