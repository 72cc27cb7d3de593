import pytest

from xmlui.linkedlist import LinkedList


def make(*items):
    result = LinkedList()
    for item in items:
        result.push_back(item)
    return result


def test_push_back_keeps_order_and_assigns_ids():
    values = make("a", "b", "c")
    assert list(values) == ["a", "b", "c"]
    assert list(values.items_with_ids()) == [(0, "a"), (1, "b"), (2, "c")]
    assert len(values) == 3


def test_push_front_prepends_and_continues_ids():
    values = make("a")
    values.push_front("z")
    assert list(values.items_with_ids()) == [(1, "z"), (0, "a")]


def test_explicit_ids_do_not_consume_free_ids():
    values = LinkedList()
    values.push_back("x", 7)
    values.push_back("y")
    assert list(values.items_with_ids()) == [(7, "x"), (0, "y")]


def test_first_and_last():
    values = make(1, 2, 3)
    assert values.first() == 1
    assert values.last() == 3


def test_first_and_last_of_empty_list_are_none():
    values = LinkedList()
    assert values.first() is None
    assert values.last() is None


def test_pop_back_and_front():
    values = make(1, 2, 3)
    assert values.pop_back() == 3
    assert values.pop_front() == 1
    assert list(values) == [2]
    assert values.pop_back() == 2
    assert len(values) == 0


def test_pop_from_empty_raises():
    values = LinkedList()
    with pytest.raises(IndexError):
        values.pop_back()
    with pytest.raises(IndexError):
        values.pop_front()


def test_pop_removes_first_matching_item():
    values = make("a", "b", "a")
    assert values.pop("a") == "a"
    assert list(values.items_with_ids()) == [(1, "b"), (2, "a")]


def test_pop_missing_item_raises():
    values = make("a")
    with pytest.raises(ValueError):
        values.pop("b")
    assert list(values) == ["a"]


def test_pop_by_id():
    values = make("a", "b", "c")
    assert values.pop_by_id(1) == "b"
    assert list(values) == ["a", "c"]
    assert values.first() == "a"
    assert values.last() == "c"


def test_pop_by_missing_id_raises():
    values = make("a")
    with pytest.raises(KeyError):
        values.pop_by_id(5)


def test_get_by_id_does_not_modify():
    values = make("a", "b")
    assert values.get_by_id(1) == "b"
    assert values.get_by_id(9) is None
    assert list(values) == ["a", "b"]


def test_contains():
    values = make("a", "b")
    assert "b" in values
    assert "c" not in values


def test_single_element_removal_empties_list():
    values = make("only")
    assert values.pop("only") == "only"
    assert values.first() is None
    assert values.last() is None
    values.push_back("next")
    assert values.first() == values.last() == "next"