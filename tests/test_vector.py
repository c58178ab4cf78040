import pytest

from dsakit.vector import DynamicArray


def test_default_capacity_is_one():
    assert DynamicArray().capacity() == 1


def test_append_and_index():
    array = DynamicArray()
    for value in (10, 20, 30):
        array.append(value)
    assert list(array) == [10, 20, 30]
    assert array[1] == 20
    assert len(array) == 3


def test_capacity_doubles_and_covers_size():
    array = DynamicArray()
    seen = [array.capacity()]
    for value in range(20):
        array.append(value)
        assert array.capacity() >= len(array)
        seen.append(array.capacity())
    for before, after in zip(seen, seen[1:]):
        assert after in (before, 2 * before)


def test_pop_keeps_capacity():
    array = DynamicArray(items=[1, 2, 3])
    capacity = array.capacity()
    assert array.pop() == 3
    assert array.capacity() == capacity
    assert len(array) == 2


def test_front_and_back():
    array = DynamicArray(items=[4, 5, 6])
    assert array.front() == 4
    assert array.back() == 6


@pytest.mark.parametrize("method", ["pop", "front", "back"])
def test_empty_access_raises(method):
    with pytest.raises(IndexError):
        getattr(DynamicArray(), method)()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        DynamicArray(0)


def test_initial_capacity_not_grown_until_full():
    array = DynamicArray(4, items=[1, 2, 3, 4])
    assert array.capacity() == 4
    array.append(5)
    assert array.capacity() == 8