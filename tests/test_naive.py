from naive import NaiveIndex
from quadtree import QuadTree


def test_insert_search_and_size():
    naive = NaiveIndex((0, 5, 0, 5))
    assert naive.insert((1, 2))
    assert naive.insert((2, 2))
    assert naive.insert((2, 3))
    assert not naive.insert((5, 1))
    assert naive.size() == 3
    assert len(naive) == 3
    assert set(naive.search((0, 3, 0, 3))) == {(1, 2), (2, 2)}


def test_duplicates_are_skipped():
    naive = NaiveIndex((0, 10, 0, 10))
    for _ in range(5):
        assert naive.insert((1, 1))
    assert naive.size() == 1


def test_agrees_with_quadtree_on_grid():
    world = (0, 100, 0, 100)
    qt = QuadTree.with_capacity(8, world)
    naive = NaiveIndex(world)
    for i in range(0, 102, 3):
        for j in range(0, 102, 2):
            qt.insert((i, j))
            naive.insert((i, j))
    query = (60, 120, 80, 150)
    assert qt.size() == naive.size()
    assert set(qt.search(query)) == set(naive.search(query))
