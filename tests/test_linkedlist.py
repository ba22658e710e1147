import pytest

from minitalk.linkedlist import LinkedList, Node


def test_construct_keeps_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_empty_list_has_no_head_and_zero_length():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.head is None
    assert list(lst) == []


def test_prepend_puts_content_first():
    lst = LinkedList([2, 3])
    node = lst.prepend(1)
    assert list(lst) == [1, 2, 3]
    assert lst.head is node
    assert isinstance(node, Node) and node.content == 1


def test_prepend_on_empty_sets_last():
    lst = LinkedList()
    lst.prepend("x")
    assert lst.last() == "x"
    assert len(lst) == 1


def test_append_puts_content_last():
    lst = LinkedList([1])
    lst.append(2)
    lst.append(3)
    assert list(lst) == [1, 2, 3]
    assert lst.last() == 3


def test_last_of_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_len_counts_nodes():
    lst = LinkedList(range(5))
    lst.append(5)
    lst.prepend(-1)
    assert len(lst) == 7


def test_nodes_are_linked():
    lst = LinkedList(["a", "b"])
    assert lst.head.content == "a"
    assert lst.head.next.content == "b"
    assert lst.head.next.next is None


def test_for_each_visits_in_order():
    seen = []
    LinkedList([3, 1, 2]).for_each(seen.append)
    assert seen == [3, 1, 2]


def test_map_applies_function_into_new_list():
    original = LinkedList(["ab", "cd"])
    mapped = original.map(str.upper)
    assert list(mapped) == ["AB", "CD"]
    assert list(original) == ["ab", "cd"]
    assert mapped is not original


def test_map_without_function_copies_contents():
    items = [[1], [2]]
    mapped = LinkedList(items).map()
    assert list(mapped) == items
    assert all(a is not b for a, b in zip(mapped, items))


def test_map_failure_deletes_made_contents_last_first():
    deleted = []

    def func(value):
        return None if value == 3 else value * 10

    with pytest.raises(ValueError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [20, 10]


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str.upper)) == 0


def test_pop_front_removes_and_deletes():
    deleted = []
    lst = LinkedList(["a", "b"])
    assert lst.pop_front(deleted.append) == "a"
    assert deleted == ["a"]
    assert list(lst) == ["b"]


def test_pop_front_last_node_empties_list():
    lst = LinkedList(["only"])
    lst.pop_front()
    assert len(lst) == 0
    with pytest.raises(IndexError):
        lst.last()
    lst.append("again")
    assert list(lst) == ["again"]


def test_pop_front_of_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_tail_to_head():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [3, 2, 1]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_still_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []