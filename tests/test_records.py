import pytest
from pydantic import ValidationError

from wingo.core.models import OutcomeRecord, base_color, color_for, outcome_color, size_for
from wingo.core.sequence import InsufficientData, SequenceStore


def test_color_mapping():
    assert color_for(0) == 'red+violet'
    assert color_for(5) == 'green+violet'
    assert [color_for(n) for n in (1, 3, 7, 9)] == ['green'] * 4
    assert [color_for(n) for n in (2, 4, 6, 8)] == ['red'] * 4


def test_size_mapping():
    assert [size_for(n) for n in range(10)] == ['Small'] * 5 + ['Big'] * 5


def test_base_color():
    assert base_color('green+violet') == 'green'
    assert base_color('RED+violet') == 'red'
    assert base_color('violet') == 'violet'
    assert base_color('blue') == 'red'


def test_outcome_color():
    assert outcome_color('red+violet') == 'violet'
    assert outcome_color('green+violet') == 'green'
    assert outcome_color('violet') == 'violet'
    assert outcome_color('red') == 'red' and outcome_color('blue') == 'red'


def test_record_from_number():
    r = OutcomeRecord.from_number(20240101, 5)
    assert r.period == '20240101' and r.color == 'green+violet' and r.size == 'Big'
    assert r.base_color == 'green' and r.period_key == 20240101


def test_non_numeric_period_sorts_first():
    r = OutcomeRecord(period='abc', number=1, color='green', size='Small')
    assert r.period_key == 0


def test_number_out_of_range():
    with pytest.raises(ValidationError):
        OutcomeRecord(period='1', number=10, color='red', size='Big')


def test_store_sorts_numerically(make_records):
    recs = make_records([1, 2, 3], start=8)  # periods 8, 9, 10
    store = SequenceStore.load(reversed(recs))
    assert [r.period for r in store.records] == ['8', '9', '10']
    assert store.latest_period == '10' and store.next_period() == '11'


def test_store_keeps_duplicates(make_records):
    a = OutcomeRecord.from_number(5, 1)
    b = OutcomeRecord.from_number(5, 2)
    store = SequenceStore.load([b, a])
    assert len(store) == 2 and store.numbers == [2, 1]


def test_store_tracks(alternating_records):
    store = SequenceStore.load(alternating_records)
    assert store.colors[:2] == ['red', 'green']
    assert set(store.sizes) == {'Small'}


def test_require(make_records):
    store = SequenceStore.load(make_records([1] * 9))
    with pytest.raises(InsufficientData) as exc:
        store.require()
    assert exc.value.available == 9 and exc.value.required == 10
    assert SequenceStore.load(make_records([1] * 10)).require() is not None


def test_next_period_non_numeric():
    store = SequenceStore.load([OutcomeRecord(period='x1', number=1, color='green', size='Small')])
    assert store.next_period() is None


def test_size_must_be_big_or_small():
    with pytest.raises(ValidationError):
        OutcomeRecord(period='1', number=7, color='green', size='Huge')
