import pytest

from theboys.lista import IntList


def test_insert_at_end_and_start():
    lst = IntList()
    assert lst.insert(1) == 1
    assert lst.insert(2, -1) == 2
    assert lst.insert(0, 0) == 3
    assert list(lst) == [0, 1, 2]


def test_insert_middle():
    lst = IntList([10, 30])
    lst.insert(20, 1)
    assert list(lst) == [10, 20, 30]


def test_insert_beyond_end_appends():
    lst = IntList([1, 2])
    lst.insert(9, 2)
    lst.insert(8, 100)
    assert list(lst) == [1, 2, 9, 8]


def test_insert_bad_position():
    with pytest.raises(IndexError):
        IntList([1]).insert(5, -2)


def test_remove_positions():
    lst = IntList([1, 2, 3, 4, 5])
    assert lst.remove(0) == 1
    assert lst.remove(-1) == 5
    assert lst.remove(1) == 3
    assert list(lst) == [2, 4]
    assert lst.remove(1) == 4
    assert lst.remove(0) == 2
    assert len(lst) == 0


def test_remove_errors():
    with pytest.raises(IndexError):
        IntList().remove(0)
    with pytest.raises(IndexError):
        IntList([1]).remove(1)


def test_fifo_behaviour():
    lst = IntList()
    for value in (5, 6, 7):
        lst.insert(value, -1)
    assert [lst.remove(0) for _ in range(3)] == [5, 6, 7]


def test_get_does_not_remove():
    lst = IntList([4, 5, 6])
    assert lst.get(-1) == 6
    assert lst.get(0) == 4
    assert lst.get(1) == 5
    assert len(lst) == 3


def test_get_errors():
    with pytest.raises(IndexError):
        IntList().get(-1)
    with pytest.raises(IndexError):
        IntList([1, 2]).get(2)


def test_find():
    lst = IntList([3, 1, 3])
    assert lst.find(3) == 0
    assert lst.find(1) == 1
    assert lst.find(42) == -1


def test_str():
    assert str(IntList([1, 2, 3])) == "1 2 3"
    assert str(IntList()) == ""