import pytest

import constants as C
from point_sets import XorShift64, clustered_points, cluster_density, random_query, uniform_points, xorshift_points


def test_xorshift_first_value():
    # 1 -> 8193 -> 8257 -> 1082269761
    rng = XorShift64(seed=1, upper=1000)
    assert rng.next() == 761
    assert rng.state == 1082269761


def test_xorshift_is_deterministic_and_bounded():
    a = XorShift64(seed=42, upper=10000)
    b = XorShift64(seed=42, upper=10000)
    values = [a.next() for _ in range(1000)]
    assert values == [b.next() for _ in range(1000)]
    assert all(0 <= v < 10000 for v in values)
    assert len(set(values)) > 900


def test_xorshift_state_stays_64_bit():
    rng = XorShift64(seed=C.XORSHIFT_MASK, upper=7)
    for _ in range(100):
        rng.next()
        assert 0 < rng.state <= C.XORSHIFT_MASK


def test_xorshift_zero_seed_uses_fallback():
    rng = XorShift64(seed=0)
    assert rng.state == C.XORSHIFT_FALLBACK_SEED
    assert len({rng.next() for _ in range(20)}) > 1


def test_xorshift_points():
    pts = xorshift_points(XorShift64(seed=7, upper=50), 25)
    assert len(pts) == 25
    assert all(0 <= x < 50 and 0 <= y < 50 for x, y in pts)


def test_uniform_points():
    pts = uniform_points(500, 100, seed=3)
    assert len(pts) == 500
    assert all(isinstance(x, int) and 0 <= x < 100 and 0 <= y < 100 for x, y in pts)
    assert pts == uniform_points(500, 100, seed=3)


def test_clustered_points():
    pts = clustered_points(300, 1000, seed=11)
    assert len(pts) == 300
    assert all(0 <= x < 1000 and 0 <= y < 1000 for x, y in pts)
    assert pts == clustered_points(300, 1000, seed=11)


@pytest.mark.parametrize("x, y", [(0, 0), (123, 456), (999, 1)])
def test_cluster_density_in_unit_range(x, y):
    assert 0.0 <= cluster_density(x, y) <= 1.0


def test_random_query_with_size():
    rng = XorShift64(seed=5, upper=10000)
    x1, x2, y1, y2 = random_query(rng, 50)
    assert x2 - x1 == 50
    assert y2 - y1 == 50


def test_random_query_sorted():
    rng = XorShift64(seed=5, upper=1000)
    for _ in range(50):
        x1, x2, y1, y2 = random_query(rng)
        assert x1 <= x2
        assert y1 <= y2
