import pytest

from dsakit.disjoint_set import DisjointSet


def test_each_item_starts_alone():
    dsu = DisjointSet(5)
    assert [dsu.find(i) for i in range(5)] == list(range(5))


def test_union_joins_sets():
    dsu = DisjointSet(4)
    assert dsu.union(0, 1) is True
    assert dsu.find(0) == dsu.find(1)
    assert dsu.find(2) != dsu.find(0)


def test_union_of_joined_items_returns_false():
    dsu = DisjointSet(3)
    dsu.union(0, 1)
    dsu.union(1, 2)
    assert dsu.union(0, 2) is False


def test_equal_sizes_first_root_wins():
    dsu = DisjointSet(2)
    dsu.union(0, 1)
    assert dsu.find(1) == 0


def test_smaller_set_joins_larger():
    dsu = DisjointSet(3)
    dsu.union(0, 1)
    dsu.union(2, 0)
    assert dsu.find(2) == 0


def test_transitive_connection():
    dsu = DisjointSet(6)
    for a, b in [(0, 1), (2, 3), (1, 3), (4, 5)]:
        dsu.union(a, b)
    roots = {dsu.find(i) for i in range(4)}
    assert len(roots) == 1
    assert dsu.find(4) == dsu.find(5)
    assert dsu.find(4) not in roots


def test_out_of_range_item():
    dsu = DisjointSet(3)
    with pytest.raises(IndexError):
        dsu.find(3)
    with pytest.raises(IndexError):
        dsu.union(-1, 0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-1)