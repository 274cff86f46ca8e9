import pytest

from algodrills.linked import (
    LinkedList,
    Node,
    create_linked_list,
    delete_node,
    from_values,
    middle,
    nth_from_last,
    nth_from_last_recursive,
    to_values,
)


def test_create_linked_list_counts_from_one():
    assert to_values(create_linked_list(5)) == list(range(1, 6))


@pytest.mark.parametrize("size", [0, -3])
def test_create_linked_list_empty(size):
    assert create_linked_list(size) is None


def test_round_trip_values():
    values = [7, 3, 9, 3]
    assert to_values(from_values(values)) == values


def test_from_values_empty():
    assert from_values([]) is None


def test_linked_list_len_and_iter():
    lst = LinkedList(range(1, 8))
    assert len(lst) == 7
    assert list(lst) == list(range(1, 8))


def test_clear_empties_list():
    lst = LinkedList([1, 2, 3])
    lst.clear()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.head is None


def test_clear_on_empty_list():
    lst = LinkedList()
    lst.clear()
    assert len(lst) == 0


@pytest.mark.parametrize("index", [1, 2, 5])
def test_get_nth(index):
    values = [10, 20, 30, 40, 50]
    assert LinkedList(values).get_nth(index) == values[index - 1]


def test_get_nth_beyond_size():
    with pytest.raises(IndexError):
        LinkedList([1, 2, 3]).get_nth(4)


def test_get_nth_empty():
    with pytest.raises(IndexError):
        LinkedList().get_nth(1)


@pytest.mark.parametrize("index", [1, 3, 6])
def test_nth_from_last(index):
    values = [4, 8, 15, 16, 23, 42]
    head = from_values(values)
    assert nth_from_last(head, index) == values[-index]
    assert nth_from_last_recursive(head, index) == values[-index]


def test_nth_from_last_empty():
    with pytest.raises(ValueError):
        nth_from_last(None, 1)


@pytest.mark.parametrize("index", [0, 7])
def test_nth_from_last_out_of_range(index):
    head = create_linked_list(6)
    with pytest.raises(IndexError):
        nth_from_last(head, index)
    with pytest.raises(IndexError):
        nth_from_last_recursive(head, index)


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 10])
def test_middle_is_first_middle(size):
    values = list(range(1, size + 1))
    assert middle(from_values(values)) == values[(size - 1) // 2]


def test_middle_empty():
    with pytest.raises(ValueError):
        middle(None)


def test_delete_node_head():
    head = create_linked_list(4)
    delete_node(head)
    assert to_values(head) == list(range(2, 5))


def test_delete_node_inside():
    head = from_values([1, 2, 3, 4])
    delete_node(head.next)
    assert to_values(head) == [1, 3, 4]


def test_delete_last_node_raises():
    with pytest.raises(ValueError):
        delete_node(Node(1))