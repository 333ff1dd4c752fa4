from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from sphere_n.tables import DEFAULT_CACHE, N_POINTS, TableCache, get_tp


@pytest.fixture
def cache():
    return TableCache()


def test_grid(cache):
    assert cache.x.shape == (N_POINTS,)
    assert cache.x[0] == 0.0
    assert cache.x[-1] == pytest.approx(np.pi)
    assert np.all(np.diff(cache.x) > 0)


def test_base_cases(cache):
    np.testing.assert_array_equal(cache.get_tp(0), cache.x)
    np.testing.assert_array_equal(cache.get_tp(1), -np.cos(cache.x))


def test_tp2_closed_form(cache):
    x = cache.x
    expected = (x - np.cos(x) * np.sin(x)) / 2.0
    np.testing.assert_allclose(cache.get_tp(2), expected, atol=1e-14)
    assert cache.get_tp(2)[-1] == pytest.approx(np.pi / 2)


def test_recurrence_matches_previous_entry(cache):
    tp2 = cache.get_tp(2)
    tp4 = cache.get_tp(4)
    expected = (3 * tp2 + cache.neg_cosine * cache.sine ** 3) / 4
    np.testing.assert_allclose(tp4, expected)

    tp3 = cache.get_tp(3)
    expected = (2 * cache.get_tp(1) + cache.neg_cosine * cache.sine ** 2) / 3
    np.testing.assert_allclose(tp3, expected)


@pytest.mark.parametrize("n, total", [
    (0, np.pi),
    (1, 2.0),
    (2, np.pi / 2),
    (3, 4.0 / 3.0),
    (4, 3 * np.pi / 8),
    (5, 16.0 / 15.0),
])
def test_table_range_is_wallis_integral(cache, n, total):
    tp = cache.get_tp(n)
    assert tp[-1] - tp[0] == pytest.approx(total, rel=1e-9)


@pytest.mark.parametrize("n", range(12))
def test_tables_are_monotone(cache, n):
    assert np.all(np.diff(cache.get_tp(n)) >= -1e-12)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 6])
def test_invert_clamps_outside_table_range(cache, n):
    tp = cache.get_tp(n)
    assert cache.invert(n, tp[0] - 1.0) == 0.0
    assert cache.invert(n, tp[-1] + 1.0) == pytest.approx(np.pi)
    assert cache.invert(n, float(tp[0])) == 0.0
    assert cache.invert(n, float(tp[-1])) == pytest.approx(np.pi)


@pytest.mark.parametrize("n", [2, 3, 4])
def test_invert_is_inverse_of_table(cache, n):
    tp = cache.get_tp(n)
    for i in (10, 150, 280):
        assert cache.invert(n, float(tp[i])) == pytest.approx(cache.x[i], abs=1e-12)
    # Tp(2) is symmetric about pi/2
    assert cache.invert(2, np.pi / 4) == pytest.approx(np.pi / 2, abs=1e-12)


def test_get_tp_is_idempotent(cache):
    first = cache.get_tp(6)
    second = cache.get_tp(6)
    assert first is second
    np.testing.assert_array_equal(first, second)


def test_tables_are_read_only(cache):
    tp = cache.get_tp(3)
    with pytest.raises(ValueError):
        tp[0] = 1.0


def test_even_and_odd_chains_are_separate(cache):
    cache.get_tp(4)
    assert cache.cached_keys() == [0, 2, 4]
    cache.get_tp(3)
    assert cache.cached_keys() == [0, 1, 2, 3, 4]


def test_clear(cache):
    before = cache.get_tp(5).copy()
    cache.clear()
    assert cache.cached_keys() == []
    np.testing.assert_array_equal(cache.get_tp(5), before)


def test_negative_index_rejected(cache):
    with pytest.raises(ValueError):
        cache.get_tp(-1)


def test_custom_resolution():
    cache = TableCache(resolution=50)
    assert cache.get_tp(7).shape == (50,)
    with pytest.raises(ValueError):
        TableCache(resolution=1)


def test_concurrent_population_is_consistent():
    shared = TableCache()
    serial = TableCache()
    indices = list(range(20)) * 8

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(shared.get_tp, indices))

    for n, tp in zip(indices, results):
        assert tp is shared.get_tp(n)
        np.testing.assert_array_equal(tp, serial.get_tp(n))
    assert shared.cached_keys() == list(range(20))


def test_module_shortcut_uses_default_cache():
    assert get_tp(2) is DEFAULT_CACHE.get_tp(2)
    other = TableCache()
    assert get_tp(2, cache=other) is other.get_tp(2)
