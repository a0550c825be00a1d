import pytest

from idxlist.col import InvalidIndexError, MemoryPolicy, NodeIdxError
from idxlist.doubly_list import DoublyList


def chars(seq):
    lst = DoublyList()
    for c in seq:
        lst.push_back(c)
    return lst


def test_len_after_mixed_operations():
    lst = DoublyList()
    assert len(lst) == 0
    assert lst.is_empty()
    lst.push_back("a")
    lst.push_front("b")
    lst.pop_back()
    lst.push_back("c")
    assert len(lst) == 2
    assert list(lst) == ["b", "c"]


def test_push_front_and_back_order():
    lst = DoublyList()
    lst.push_back(3)
    lst.push_front(1)
    lst.push_front(7)
    lst.push_back(4)
    lst.push_front(9)
    assert list(lst) == [9, 7, 1, 3, 4]
    assert lst.front() == 9
    assert lst.back() == 4


def test_pop_on_empty_returns_none():
    lst = DoublyList()
    assert lst.pop_front() is None
    assert lst.pop_back() is None


def test_remove():
    lst = DoublyList()
    lst.push_back("c")
    lst.push_back("d")
    idx = lst.push_front("b")
    lst.push_front("a")
    lst.push_back("e")
    assert list(lst) == ["a", "b", "c", "d", "e"]
    assert lst.remove(idx) == "b"
    assert list(lst) == ["a", "c", "d", "e"]


def test_remove_invalid_raises():
    lst = chars("abcde")
    idx = lst.push_back("f")
    lst.pop_back()
    with pytest.raises(InvalidIndexError) as info:
        lst.remove(idx)
    assert info.value.reason is NodeIdxError.REMOVED_NODE


def test_remove_ends_updates_front_and_back():
    lst = DoublyList()
    a = lst.push_back("a")
    lst.push_back("b")
    c = lst.push_back("c")
    lst.remove(a)
    assert lst.front() == "b"
    lst = DoublyList(policy=MemoryPolicy.LAZY)
    lst.push_back("a")
    lst.push_back("b")
    c = lst.push_back("c")
    lst.remove(c)
    assert lst.back() == "b"
    assert list(lst) == ["a", "b"]


def test_try_remove():
    lst = DoublyList()
    lst.push_back("c")
    lst.push_back("d")
    idx = lst.push_front("b")
    lst.push_front("a")
    lst.push_back("e")
    assert lst.try_remove(idx) == "b"
    assert list(lst) == ["a", "c", "d", "e"]
    assert lst.idx_err(idx) is NodeIdxError.REMOVED_NODE
    assert lst.try_remove(idx) is None


def test_insert_next_to():
    lst = DoublyList()
    lst.push_back("a")
    b = lst.push_back("b")
    lst.push_back("c")
    lst.push_back("d")
    x = lst.insert_next_to(b, "x")
    assert lst.get(x) == "x"
    assert list(lst) == ["a", "b", "x", "c", "d"]


def test_insert_next_to_back_updates_back():
    lst = chars("ab")
    back = list(lst.indices())[-1]
    lst.insert_next_to(back, "z")
    assert lst.back() == "z"
    assert list(reversed(list(lst))) == ["z", "b", "a"]


def test_insert_prev_to():
    lst = DoublyList()
    lst.push_back("a")
    lst.push_back("b")
    c = lst.push_back("c")
    lst.push_back("d")
    x = lst.insert_prev_to(c, "x")
    assert lst.get(x) == "x"
    assert list(lst) == ["a", "b", "x", "c", "d"]


def test_insert_prev_to_front_updates_front():
    lst = chars("ab")
    front = next(lst.indices())
    lst.insert_prev_to(front, "z")
    assert lst.front() == "z"
    assert list(lst) == ["z", "a", "b"]


def test_try_insert_next_to():
    lst = DoublyList()
    lst.push_back("a")
    b = lst.push_back("b")
    lst.push_back("c")
    lst.push_back("d")
    x = lst.try_insert_next_to(b, "x")
    assert lst.get(x) == "x"
    assert list(lst) == ["a", "b", "x", "c", "d"]
    lst.remove(b)
    assert list(lst) == ["a", "x", "c", "d"]
    assert lst.try_insert_next_to(b, "y") is None
    assert list(lst) == ["a", "x", "c", "d"]


def test_try_insert_prev_to():
    lst = DoublyList()
    lst.push_back("a")
    lst.push_back("b")
    c = lst.push_back("c")
    lst.push_back("d")
    x = lst.try_insert_prev_to(c, "x")
    assert lst.get(x) == "x"
    assert list(lst) == ["a", "b", "x", "c", "d"]
    lst.remove(c)
    assert list(lst) == ["a", "b", "x", "d"]
    assert lst.try_insert_prev_to(c, "y") is None
    assert list(lst) == ["a", "b", "x", "d"]


def test_insert_invalid_raises():
    lst = chars("ab")
    other = DoublyList()
    foreign = other.push_back("q")
    with pytest.raises(InvalidIndexError):
        lst.insert_next_to(foreign, "z")
    with pytest.raises(InvalidIndexError):
        lst.insert_prev_to(foreign, "z")
    assert list(lst) == ["a", "b"]


def test_slice_example():
    lst = DoublyList()
    lst.push_back(3)
    lst.push_front(1)
    lst.push_front(7)
    lst.push_back(4)
    lst.push_front(9)
    expected = [9, 7, 1, 3, 4]
    assert list(lst.slice()) == expected
    idx = list(lst.indices())
    s = lst.slice(idx[1], idx[3], include_end=True)
    assert s.front() == 7
    assert s.back() == 3
    assert list(s) == [7, 1, 3]
    assert sum(s) == 11


def test_slice_is_directed():
    lst = DoublyList(range(10))
    idx = list(lst.indices())
    assert list(lst.slice(idx[1], idx[4])) == [1, 2, 3]
    assert list(lst.slice(idx[4], idx[1])) == [4, 5, 6, 7, 8, 9]


def test_slice_exclusive_end_equal_start_is_empty():
    lst = DoublyList(range(5))
    idx = list(lst.indices())
    s = lst.slice(idx[2], idx[2])
    assert list(s) == []
    assert s.is_empty()


def test_slice_invalid_bound_raises():
    lst = DoublyList(range(5))
    idx = list(lst.indices())
    lst.clear()
    with pytest.raises(InvalidIndexError):
        lst.slice(idx[0], idx[1])


def test_slice_mut_reverse():
    lst = DoublyList()
    c = lst.push_back("c")
    lst.push_front("b")
    lst.push_front("a")
    lst.push_back("d")
    e = lst.push_back("e")
    assert list(lst) == ["a", "b", "c", "d", "e"]
    lst.reverse()
    assert list(lst) == ["e", "d", "c", "b", "a"]
    s = lst.slice_mut(e, c, include_end=True)
    assert list(s) == ["e", "d", "c"]
    s.reverse()
    assert list(s) == ["c", "d", "e"]
    assert list(lst) == ["c", "d", "e", "b", "a"]


def test_move_next_to_example():
    lst = DoublyList(range(6))
    idx = list(lst.indices())
    lst.move_next_to(idx[4], idx[1])
    assert list(lst) == [0, 1, 4, 2, 3, 5]
    lst.move_next_to(idx[2], idx[5])
    assert list(lst) == [0, 1, 4, 3, 5, 2]
    lst.move_next_to(idx[3], idx[0])
    assert list(lst) == [0, 3, 1, 4, 5, 2]


def test_move_to_front_and_back_example():
    lst = DoublyList(range(6))
    idx = list(lst.indices())
    lst.move_to_front(idx[5])
    assert list(lst) == [5, 0, 1, 2, 3, 4]
    lst = DoublyList(range(6))
    idx = list(lst.indices())
    lst.move_to_back(idx[1])
    assert list(lst) == [0, 2, 3, 4, 5, 1]


def test_swap_example():
    lst = DoublyList(range(6))
    idx = list(lst.indices())
    lst.swap(idx[1], idx[5])
    assert list(lst) == [0, 5, 2, 3, 4, 1]
    lst.swap(idx[4], idx[0])
    assert list(lst) == [4, 5, 2, 3, 0, 1]
    lst.swap(idx[3], idx[5])
    assert list(lst) == [4, 3, 2, 5, 0, 1]


def test_link_editing_example():
    lst = DoublyList(range(8))
    idx = list(lst.indices())
    lst.remove_link(idx[0], idx[1])
    lst.remove_link(idx[2], idx[3])
    lst.add_link(idx[0], idx[3])
    lst.add_link(idx[7], idx[1])
    lst.set_back(idx[2])
    assert list(lst) == [0, 3, 4, 5, 6, 7, 1, 2]


def test_idx_err_progression():
    lst = DoublyList()
    a = lst.push_back("a")
    b = lst.push_back("b")
    lst.push_front("c")
    lst.push_back("d")
    lst.push_front("e")
    f = lst.push_back("f")
    assert lst.idx_err(a) is None
    assert lst.idx_err(f) is None
    lst.pop_back()
    assert lst.idx_err(b) is None
    assert lst.idx_err(f) is NodeIdxError.REMOVED_NODE
    assert lst.get(f) is None
    lst.clear()
    assert lst.idx_err(a) is NodeIdxError.OUT_OF_BOUNDS
    assert lst.idx_err(b) is NodeIdxError.OUT_OF_BOUNDS
    assert lst.is_valid(f) is False


def test_auto_reorganization_invalidates_indices():
    lst = DoublyList()
    lst.push_back("a")
    lst.push_back("b")
    c = lst.push_back("c")
    lst.push_back("d")
    lst.push_back("e")
    assert lst.get(c) == "c"
    lst.pop_back()
    assert lst.get(c) == "c"
    lst.pop_front()
    assert lst.idx_err(c) is NodeIdxError.REORGANIZED_COLLECTION
    assert lst.get(c) is None
    assert list(lst) == ["b", "c", "d"]


def test_lazy_policy_reclaims_only_on_request():
    lst = DoublyList("abcde", policy=MemoryPolicy.LAZY)
    idx = list(lst.indices())
    state = lst.memory_state()
    lst.pop_front()
    lst.pop_front()
    assert lst.memory_state() == state
    assert lst.get(idx[2]) == "c"
    assert lst.node_utilization().num_closed_nodes == 2
    lst.reclaim_closed_nodes()
    assert lst.memory_state() != state
    assert lst.idx_err(idx[2]) is NodeIdxError.REORGANIZED_COLLECTION
    assert lst.node_utilization().num_closed_nodes == 0
    assert list(lst) == ["c", "d", "e"]


def test_growth_keeps_memory_state():
    lst = DoublyList()
    state = lst.memory_state()
    a = lst.push_back(1)
    lst.push_front(0)
    lst.insert_next_to(a, 2)
    lst.insert_prev_to(a, 3)
    assert lst.memory_state() == state
    assert lst.is_valid(a)


def test_iter_x_contains_all_elements():
    lst = DoublyList()
    for value in [5, 2, 8]:
        lst.push_front(value)
    assert list(lst) == [8, 2, 5]
    assert sorted(lst.iter_x()) == sorted(lst)


def test_links_are_consistent_both_ways():
    lst = DoublyList(range(6))
    idx = list(lst.indices())
    lst.remove(idx[2])
    lst.insert_prev_to(idx[4], 9)
    forward = list(lst)
    backward = []
    cur = list(lst.indices())[-1]
    while cur is not None:
        backward.append(lst.get(cur))
        cur = lst.prev_idx_of(cur)
    assert backward == forward[::-1]
    assert len(lst) == len(forward)