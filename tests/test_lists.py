import pytest

from pushswap.libft.lists import LinkedList, Node


def test_round_trip_of_items():
    items = [3, "x", None, 7.5]
    assert list(LinkedList(items)) == items


def test_len_tracks_pushes():
    lst = LinkedList()
    assert len(lst) == 0
    lst.push_back("a")
    lst.push_front("b")
    lst.push_back("c")
    assert len(lst) == 3
    assert list(lst) == ["b", "a", "c"]


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front("only")
    assert lst.last() is node
    assert lst.head is node


def test_last_of_empty_is_none():
    assert LinkedList().last() is None


def test_last_returns_tail_node():
    lst = LinkedList(["a", "b", "c"])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == "c"
    assert tail.next is None


def test_push_back_returns_new_tail():
    lst = LinkedList(["a"])
    node = lst.push_back("b")
    assert lst.last() is node
    assert lst.head.next is node


def test_clear_calls_delete_on_each_in_order():
    deleted = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_clear_without_delete_empties():
    lst = LinkedList(range(4))
    lst.clear()
    assert list(lst) == []


def test_reuse_after_clear():
    lst = LinkedList(["a", "b"])
    lst.clear()
    lst.push_back("c")
    assert list(lst) == ["c"]
    assert len(lst) == 1


def test_for_each_visits_all():
    seen = []
    LinkedList(["p", "q", "r"]).for_each(seen.append)
    assert seen == ["p", "q", "r"]


def test_map_builds_new_list():
    source = LinkedList(["ab", "cd"])
    mapped = source.map(str.upper)
    assert list(mapped) == ["AB", "CD"]
    assert list(source) == ["ab", "cd"]
    assert len(mapped) == len(source)


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str.upper)) == []


def test_map_failure_deletes_partial_result():
    deleted = []

    def f(x):
        if x == "boom":
            raise ValueError("bad item")
        return x * 2

    lst = LinkedList(["a", "b", "boom", "c"])
    with pytest.raises(ValueError):
        lst.map(f, deleted.append)
    assert deleted == ["aa", "bb"]