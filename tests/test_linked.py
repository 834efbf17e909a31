import pytest

from minijuegos.linked import LinkedList, LinkedQueue, LinkedStack


def test_append_and_iterate():
    items = LinkedList()
    for value in (3, 5, 7, 1):
        items.append(value)
    assert list(items) == [3, 5, 7, 1]
    assert len(items) == 4


def test_render_format():
    assert LinkedList([3, 5, 7, 1]).render() == "3 5 7 1 "
    assert LinkedList().render() == ""


def test_insert_at_middle_and_get():
    items = LinkedList([3, 5, 7, 1])
    assert items.insert_at(9, 3) is True
    assert list(items) == [3, 5, 9, 7, 1]
    assert items[3] == 7


def test_insert_at_front():
    items = LinkedList([3, 5])
    assert items.insert_at(9, 1)
    assert list(items) == [9, 3, 5]


@pytest.mark.parametrize("position", [0, -1, 4, 10])
def test_insert_at_out_of_range_is_ignored(position):
    items = LinkedList([3, 5, 7])
    assert items.insert_at(9, position) is False
    assert list(items) == [3, 5, 7]


def test_insert_at_on_empty_is_ignored():
    items = LinkedList()
    assert items.insert_at(1, 1) is False
    assert len(items) == 0


def test_getitem_out_of_range():
    items = LinkedList([1, 2])
    assert items[0] == 1
    assert items[1] == 2
    with pytest.raises(IndexError):
        _ = items[2]
    with pytest.raises(IndexError):
        _ = items[-1]
    assert list(items) == [1, 2]


def test_pop_front_returns_first():
    items = LinkedList([4, 8, 15])
    assert items.pop_front() == 4
    assert list(items) == [8, 15]
    assert items.pop_front() == 8
    assert items.pop_front() == 15
    assert len(items) == 0


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_append_after_emptying():
    items = LinkedList([1])
    items.pop_front()
    items.append(2)
    assert list(items) == [2]


def test_index_and_contains():
    items = LinkedList([3, 5, 7])
    assert items.index(7) == 2
    assert items.index(42) == -1
    assert 5 in items
    assert 42 not in items


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "numbers.txt"
    original = LinkedList([1, 2, 3])
    original.save(path)
    assert path.read_text(encoding="utf-8") == "1 2 3 "
    loaded = LinkedList.load(path)
    assert list(loaded) == [1, 2, 3]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        LinkedList.load(tmp_path / "missing.txt")


def test_stack_order():
    stack = LinkedStack()
    for value in (2, 4, 3, 6):
        stack.push(value)
    assert stack.render() == "6 3 4 2 "
    assert stack.pop() == 6
    assert stack.render() == "3 4 2 "


def test_stack_pop_empty_raises():
    with pytest.raises(IndexError):
        LinkedStack().pop()


def test_queue_order():
    queue = LinkedQueue()
    for value in (2, 4, 3, 6):
        queue.enqueue(value)
    assert queue.render() == "2 4 3 6 "
    assert queue.dequeue() == 2
    assert queue.render() == "4 3 6 "


def test_queue_drains_in_insertion_order():
    queue = LinkedQueue()
    values = [5, 1, 9, 1]
    for value in values:
        queue.enqueue(value)
    drained = [queue.dequeue() for _ in range(len(queue))]
    assert drained == values
    assert len(queue) == 0