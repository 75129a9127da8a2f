import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.lists import LinkedList, Node


def test_push_front_puts_newest_first():
    lst = LinkedList(["okokokok"])
    lst.push_front("opppoppop")
    lst.push_front("wqqwqwwqqw")
    assert list(lst) == ["wqqwqwwqqw", "opppoppop", "okokokok"]
    assert len(lst) == 3


def test_push_back_appends():
    lst = LinkedList()
    lst.push_back("a")
    lst.push_back("b")
    assert list(lst) == ["a", "b"]
    assert lst.last().content == "b"


def test_push_returns_node_linked_in():
    lst = LinkedList()
    node = lst.push_front("x")
    assert lst.head is node
    assert node == Node("x", None)


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_last_node_has_no_next():
    lst = LinkedList([1, 2, 3])
    tail = lst.last()
    assert tail.content == 3
    assert tail.next is None


@given(st.lists(st.integers()))
def test_construction_preserves_order_and_length(items):
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_for_each_visits_in_order():
    seen = []
    LinkedList(["a", "b", "c"]).for_each(seen.append)
    assert seen == ["a", "b", "c"]


def test_for_each_on_empty_does_nothing():
    seen = []
    LinkedList().for_each(seen.append)
    assert seen == []


def test_map_builds_new_list():
    original = LinkedList(["ab", "cd"])
    mapped = original.map(str.upper)
    assert list(mapped) == ["AB", "CD"]
    assert list(original) == ["ab", "cd"]
    assert mapped.head is not original.head


def test_map_deletes_produced_contents_on_failure():
    deleted = []

    def func(value):
        if value == "bad":
            raise RuntimeError("boom")
        return value * 2

    with pytest.raises(RuntimeError):
        LinkedList(["a", "b", "bad", "c"]).map(func, deleted.append)
    assert deleted == ["aa", "bb"]


def test_pop_front_calls_delete_and_returns_content():
    deleted = []
    lst = LinkedList(["first", "second"])
    assert lst.pop_front(deleted.append) == "first"
    assert deleted == ["first"]
    assert list(lst) == ["second"]


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_every_content():
    deleted = []
    lst = LinkedList(["x", "y", "z"])
    lst.clear(deleted.append)
    assert deleted == ["x", "y", "z"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_empties_list():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []