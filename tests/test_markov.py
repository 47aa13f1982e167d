from wingo.analytics.markov import MarkovTables, Vote, markov_predict, train_markov

ALT = ['red', 'green'] * 5


def test_markov_rows_sum_to_one(mixed_records):
    seq = [r.base_color for r in mixed_records]
    for k in (1, 2, 3):
        table = train_markov(seq, k)
        assert table
        for row in table.values():
            assert abs(sum(row.values()) - 1.0) < 1e-9


def test_alternating_order1():
    table = train_markov(ALT, 1)
    assert table == {'red': {'green': 1.0}, 'green': {'red': 1.0}}
    assert markov_predict(table, ALT[:-1], 1) == Vote('green', 100.0)
    assert markov_predict(table, ALT, 1) == Vote('red', 100.0)


def test_state_keys_join_symbols():
    table = train_markov(ALT, 2)
    assert set(table) == {'red|green', 'green|red'}


def test_too_short_for_order():
    assert train_markov(['a'] * 5, 1) == {}
    assert train_markov(['a'] * 6, 1) == {'a': {'a': 1.0}}


def test_unseen_state_abstains():
    table = {'a': {'b': 1.0}}
    assert markov_predict(table, ['b'], 1) is None
    assert markov_predict({}, ['a'], 1) is None
    assert markov_predict(table, [], 1) is None


def test_tie_keeps_first_seen():
    table = {'a': {'x': 0.5, 'y': 0.5}}
    assert markov_predict(table, ['a'], 1).symbol == 'x'


def test_order_gating():
    seq19 = ['a', 'b', 'b'] * 6 + ['a']
    t = MarkovTables.build(seq19)
    assert t.trained(1) and not t.trained(2) and not t.trained(3)
    t = MarkovTables.build(seq19 + ['b'])
    assert t.trained(2) and not t.trained(3)
    t = MarkovTables.build((['a', 'b', 'b'] * 17)[:50])
    assert t.trained(3)
    assert t.predict(['a', 'b', 'b'], 3) == Vote('a', 100.0)


def test_training_is_deterministic(mixed_records):
    seq = [r.size for r in mixed_records]
    assert MarkovTables.build(seq) == MarkovTables.build(list(seq))
