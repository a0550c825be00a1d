# idxlist

Linked lists whose growth methods hand back index handles (`NodeIdx`). A handle
lets you read, replace, remove, move or insert next to its element in constant
time, without walking the list.

## Modules

| Module | Contents |
| --- | --- |
| `idxlist.col` | node storage `SelfRefCol`, `NodeIdx`, `NodeIdxError`, `InvalidIndexError`, `MemoryPolicy`, `MemoryState`, `Utilization` |
| `idxlist.singly_list` | `SinglyList`, a forward-linked list with a front |
| `idxlist.doubly_list` | `DoublyList`, a list with a front and a back |
| `idxlist.doubly_view` | read-only views `DoublyView` and `DoublySlice` |
| `idxlist.doubly_mut` | `DoublyMutView`: replacing elements, `reverse`, low-level link editing |
| `idxlist.doubly_moves` | `DoublyMovable` moves and swaps, mutable slice `DoublySliceMut` |
| `idxlist.ranges` | link helpers and range resolution used by slicing |

## A short tour

```python
from idxlist.doubly_list import DoublyList

letters = DoublyList("acd")
a = next(letters.indices())
b = letters.insert_next_to(a, "b")
print(list(letters))              # ['a', 'b', 'c', 'd']

letters.move_to_back(b)           # ['a', 'c', 'd', 'b']
print(letters.remove(b))          # 'b'
print(letters.front(), letters.back())   # a d
```

`DoublyList` also offers `push_back`, `push_front`, `pop_back`, `pop_front`,
`insert_prev_to`, `move_next_to`, `move_prev_to`, `move_to_front`, `swap`,
`reverse`, `next_idx_of` / `prev_idx_of` and `next_of` / `prev_of`.

### Slices

`slice(start, end, include_end=False)` returns a read-only view between two
handles; `slice_mut` returns a view that can be reversed, rearranged or edited,
with the changes visible in the list. A missing bound means the list's front
or back, and an `end` that lies before `start` makes the view run to the back.

```python
row = DoublyList("abcde")
handles = list(row.indices())
middle = row.slice_mut(handles[1], handles[3], include_end=True)
middle.reverse()
print(list(row))                  # ['a', 'd', 'c', 'b', 'e']
```

### Singly linked lists

`SinglyList` grows only at the front (`push_front`, `pop_front`) and walks
forward (`next_idx_of`, `next_of`, `set_next_of`). It has no back, no slices
and no moves.

## Validity of handles

A handle stays valid while its element is in the list and the storage has not
been reorganized. `idx_err` returns the `NodeIdxError` that explains a dead
handle (`REMOVED_NODE`, `OUT_OF_BOUNDS`, `REORGANIZED_COLLECTION`) or `None`,
and `is_valid` answers yes or no.

With `MemoryPolicy.AUTO` (the default) a removal reorganizes the storage once
more than a quarter of the nodes are closed; with `MemoryPolicy.LAZY` that
only happens on `reclaim_closed_nodes()`. `memory_state()` changes when a
reorganization moved nodes, and `node_utilization()` reports active and closed
node counts. `clear()` drops every node, so older handles become out of bounds.

Error handling by method:

- `remove`, `insert_next_to`, `insert_prev_to`, `next_idx_of`, `try_get`,
  `try_set` and the moves raise `InvalidIndexError` (its `reason` holds the
  `NodeIdxError`).
- `get` returns `None` and `set` returns `False` for a dead handle.
- `try_remove`, `try_insert_next_to` and `try_insert_prev_to` return `None`
  and leave the list unchanged.
- `move_to_front` / `move_to_back` on an empty list raise `IndexError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```