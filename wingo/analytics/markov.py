from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Sequence

TransitionTable = dict[str, dict[str, float]]

# minimum sequence length before an order is trained at all
ORDER_MIN_LENGTH = {1: 0, 2: 20, 3: 50}


@dataclass(frozen=True)
class Vote:
    symbol: str
    confidence: float  # 0..100


def state_of(window: Sequence[str]) -> str:
    return "|".join(window)


def train_markov(seq: Sequence[str], order: int) -> TransitionTable:
    """Transition probabilities from each k-symbol state to the next symbol."""
    if len(seq) < order + 5:
        return {}
    counts: dict[str, dict[str, int]] = defaultdict(dict)
    for i in range(len(seq) - order):
        row = counts[state_of(seq[i:i + order])]
        nxt = seq[i + order]
        row[nxt] = row.get(nxt, 0) + 1
    table: TransitionTable = {}
    for state, row in counts.items():
        total = sum(row.values())
        table[state] = {nxt: c / total for nxt, c in row.items()}
    return table


def markov_predict(table: TransitionTable, seq: Sequence[str], order: int) -> Vote | None:
    if len(seq) < order or not table:
        return None
    row = table.get(state_of(seq[-order:]))
    if not row:
        return None
    best, best_p = None, 0.0
    for nxt, p in row.items():
        if p > best_p:
            best, best_p = nxt, p
    return Vote(best, best_p * 100) if best is not None else None


@dataclass(frozen=True)
class MarkovTables:
    """Transition tables of orders 1-3 over one symbol track (colors or sizes)."""

    tables: dict[int, TransitionTable] = field(default_factory=dict)

    @classmethod
    def build(cls, seq: Sequence[str], orders: Sequence[int] = (1, 2, 3)) -> MarkovTables:
        tables = {}
        for k in orders:
            tables[k] = train_markov(seq, k) if len(seq) >= ORDER_MIN_LENGTH.get(k, 0) else {}
        return cls(tables)

    def trained(self, order: int) -> bool:
        return bool(self.tables.get(order))

    def predict(self, seq: Sequence[str], order: int) -> Vote | None:
        return markov_predict(self.tables.get(order, {}), seq, order)
