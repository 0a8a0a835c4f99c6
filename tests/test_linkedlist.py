import pytest

from solong.linkedlist import LinkedList, Node


def test_push_back_keeps_order():
    lst = LinkedList()
    for value in ("a", "b", "c"):
        lst.push_back(value)
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_reverses_order():
    lst = LinkedList()
    for value in (1, 2, 3):
        lst.push_front(value)
    assert list(lst) == [3, 2, 1]


def test_push_returns_node_holding_content():
    lst = LinkedList()
    node = lst.push_back("x")
    assert isinstance(node, Node)
    assert node.content == "x"
    assert lst.head is node


def test_last_of_empty_list_is_none():
    assert LinkedList().last() is None
    assert len(LinkedList()) == 0
    assert not LinkedList()


def test_last_returns_tail_node():
    lst = LinkedList([1, 2, 3])
    tail = lst.last()
    assert tail.content == 3
    assert tail.next is None


def test_push_back_links_after_previous_tail():
    lst = LinkedList([1])
    first = lst.head
    second = lst.push_back(2)
    assert first.next is second


def test_constructor_round_trip():
    values = [5, 6, 7, 8]
    assert list(LinkedList(values)) == values


def test_clear_calls_delete_in_order_and_empties():
    lst = LinkedList(["p", "q", "r"])
    deleted = []
    lst.clear(deleted.append)
    assert deleted == ["p", "q", "r"]
    assert lst.head is None
    assert len(lst) == 0


def test_clear_without_callback_leaves_list():
    lst = LinkedList([1, 2])
    lst.clear(None)
    assert list(lst) == [1, 2]


def test_iterate_visits_every_content():
    lst = LinkedList([1, 2, 3])
    seen = []
    lst.iterate(seen.append)
    assert seen == list(lst)


def test_iterate_without_callback_changes_nothing():
    lst = LinkedList([4])
    lst.iterate(None)
    assert list(lst) == [4]


def test_map_builds_new_list():
    lst = LinkedList(["a", "bc"])
    mapped = lst.map(str.upper, None)
    assert list(mapped) == ["A", "BC"]
    assert list(lst) == ["a", "bc"]
    assert mapped.head is not lst.head


def test_map_preserves_length():
    lst = LinkedList(range(6))
    assert len(lst.map(lambda v: v, None)) == len(lst)


def test_map_without_func_gives_empty_list():
    assert len(LinkedList([1, 2]).map(None, None)) == 0


def test_map_failure_deletes_partial_result():
    def func(value):
        if value == "boom":
            raise ValueError("bad value")
        return value * 2

    deleted = []
    lst = LinkedList(["a", "b", "boom", "c"])
    with pytest.raises(ValueError):
        lst.map(func, deleted.append)
    assert deleted == ["aa", "bb"]
    assert list(lst) == ["a", "b", "boom", "c"]