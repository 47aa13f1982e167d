import pytest

from wingo.analytics.stats import entropy, frequency, momentum, number_trends, top_frequency, trend_direction


def test_frequency():
    freq = frequency(['red', 'green', 'red', 'red'])
    assert freq == {'red': 0.75, 'green': 0.25}
    assert frequency([]) == {}


def test_top_frequency_first_wins_tie():
    assert top_frequency({'red': 0.5, 'green': 0.5}) == ('red', 0.5)
    assert top_frequency({}) is None


def test_momentum():
    assert momentum(['a'] * 7) == 0.5
    assert momentum(['a'] * 8) == 0.0
    assert momentum(['a', 'b'] * 4) == 1.0
    # only the last 8 symbols count
    assert momentum(['a', 'b'] * 4 + ['b'] * 8) == 0.0
    assert momentum(['a', 'a', 'b', 'b', 'a', 'a', 'b', 'b']) == pytest.approx(3 / 7)


def test_trend_direction():
    assert trend_direction([1, 1, 1, 8, 8, 8]) == 'increasing'
    assert trend_direction([8, 8, 1, 1]) == 'decreasing'
    assert trend_direction([4, 5, 4, 5]) == 'stable'
    assert trend_direction([1, 9]) == 'stable'


def test_number_trends():
    assert number_trends([1, 2, 3, 4]) is None
    t = number_trends([0, 9, 5, 4, 7])
    assert t.average == 5.0
    assert t.big_probability == pytest.approx(0.6) and t.small_probability == pytest.approx(0.4)


def test_entropy():
    assert entropy(['a', 'b']) == pytest.approx(1.0)
    assert entropy(['a', 'a']) == 0.0
