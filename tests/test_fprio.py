import pytest

from theboys.fprio import PriorityQueue


class Item:
    def __init__(self, name):
        self.name = name


def test_push_returns_size():
    q = PriorityQueue()
    assert q.push(Item("a"), 1, 5) == 1
    assert q.push(Item("b"), 1, 3) == 2
    assert len(q) == 2


def test_pop_in_priority_order():
    q = PriorityQueue()
    items = {prio: Item(str(prio)) for prio in (5, 1, 3)}
    for prio, item in items.items():
        q.push(item, 2, prio)
    popped = [q.pop() for _ in range(3)]
    assert [p for _, _, p in popped] == [1, 3, 5]
    assert popped[0][0] is items[1]
    assert len(q) == 0


def test_fifo_on_equal_priority():
    q = PriorityQueue()
    first, second, third = Item("x"), Item("y"), Item("z")
    q.push(first, 1, 7)
    q.push(second, 2, 7)
    q.push(third, 3, 7)
    assert [q.pop()[0] for _ in range(3)] == [first, second, third]


def test_kind_returned():
    q = PriorityQueue()
    item = Item("k")
    q.push(item, 9, 4)
    assert q.pop() == (item, 9, 4)


def test_duplicate_rejected():
    q = PriorityQueue()
    item = Item("dup")
    q.push(item, 1, 1)
    with pytest.raises(ValueError):
        q.push(item, 1, 2)
    assert len(q) == 1


def test_reinsert_after_pop_allowed():
    q = PriorityQueue()
    item = Item("again")
    q.push(item, 1, 1)
    q.pop()
    assert q.push(item, 1, 1) == 1


def test_none_rejected():
    with pytest.raises(ValueError):
        PriorityQueue().push(None, 1, 1)


def test_pop_empty():
    with pytest.raises(IndexError):
        PriorityQueue().pop()


def test_str_format():
    q = PriorityQueue()
    q.push(Item("a"), 1, 10)
    q.push(Item("b"), 2, 5)
    q.push(Item("c"), 3, 10)
    assert str(q) == "(2 5) (1 10) (3 10)"
    assert str(PriorityQueue()) == ""