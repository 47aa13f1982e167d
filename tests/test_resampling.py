import numpy as np
import pytest

from wingo.analytics.resampling import resample_next


def test_distribution_sums_to_one(rng):
    dist = resample_next(['red', 'green', 'green', 'red', 'green'] * 4, 500, rng)
    assert set(dist) <= {'red', 'green'}
    assert sum(dist.values()) == pytest.approx(1.0)


def test_pool_is_trailing_window(rng):
    # 'a' sits outside the last 30 symbols
    assert resample_next(['a'] * 10 + ['b'] * 30, 200, rng) == {'b': 1.0}


def test_first_position_never_sampled(rng):
    assert resample_next(['a'] + ['b'] * 9, 300, rng) == {'b': 1.0}


def test_seeded_generator_is_reproducible():
    seq = ['red', 'green', 'green', 'red', 'red', 'green', 'red'] * 3
    a = resample_next(seq, 500, np.random.default_rng(7))
    b = resample_next(seq, 500, np.random.default_rng(7))
    assert a == b


def test_degenerate_pool(rng):
    assert resample_next(['a'], 100, rng) == {}
    assert resample_next([], 100, rng) == {}
