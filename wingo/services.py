from dataclasses import asdict
from typing import Iterable, Optional

import numpy as np

from wingo.analytics.ensemble import predict, train
from wingo.analytics.patterns import alternations, repeat_predict, runs
from wingo.analytics.stats import entropy, frequency, momentum, number_trends
from wingo.config import get_mode, settings
from wingo.core.logging import get_logger
from wingo.core.models import OutcomeRecord, outcome_color
from wingo.core.sequence import InsufficientData, SequenceStore
from wingo.schemas import AccuracyOut, ForecastOut, ReplayItem

log = get_logger(__name__)

INSUFFICIENT = "Insufficient data for prediction"


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(settings.seed if seed is None else seed)


def forecast(records: Iterable[OutcomeRecord], mode: str = "model_1",
             rng: Optional[np.random.Generator] = None, with_history: bool = True) -> ForecastOut:
    """Train a fresh model on ``records`` and predict the next outcome.

    Too few records is a normal outcome, reported as ``success=False``.
    """
    cfg = get_mode(mode)
    rng = rng or make_rng()
    store = SequenceStore.load(records)
    try:
        model = train(store)
    except InsufficientData as e:
        log.info("forecast_skipped", mode=cfg.key, records=e.available, required=e.required)
        return ForecastOut(success=False, mode=cfg.key, model_name=cfg.name,
                           latest_period=store.latest_period, training_records=len(store),
                           error=INSUFFICIENT)

    result = predict(model, cfg, rng)
    recent = replay_history(store.records, mode, rng) if with_history else []
    log.info("forecast", mode=cfg.key, records=len(store), color=result.color, size=result.size,
             confidence=round(result.overall_confidence, 1))
    return ForecastOut(
        success=True,
        mode=cfg.key,
        model_name=cfg.name,
        latest_period=store.latest_period,
        period=store.next_period(),
        training_records=len(store),
        prediction=result,
        recent_predictions=recent,
    )


def replay_history(records: Iterable[OutcomeRecord], mode: str = "model_1",
                   rng: Optional[np.random.Generator] = None,
                   last: Optional[int] = None) -> list[ReplayItem]:
    """Re-run the forecaster over the most recent records, each time trained only on what came before.

    Newest first. Needs ``last + 2`` records at least; shorter inputs give an empty list.
    """
    cfg = get_mode(mode)
    rng = rng or make_rng()
    last = settings.history_size if last is None else last
    store = SequenceStore.load(records)
    if len(store) < last + 2:
        return []

    out = []
    for i in range(len(store) - last, len(store)):
        actual = store.records[i]
        try:
            model = train(store.before(i))
        except InsufficientData:
            continue
        pred = predict(model, cfg, rng)
        predicted_color = outcome_color(pred.color)
        actual_color = outcome_color(actual.color)
        out.append(ReplayItem(
            period=actual.period,
            predicted_color=predicted_color,
            predicted_size=pred.size,
            actual_color=actual_color,
            actual_size=actual.size,
            actual_number=actual.number,
            color_correct=predicted_color == actual_color,
            size_correct=pred.size == actual.size,
        ))
    out.reverse()
    return out


def accuracy(items: Iterable[ReplayItem]) -> AccuracyOut:
    items = list(items)
    total = len(items)
    color_ok = sum(1 for x in items if x.color_correct)
    size_ok = sum(1 for x in items if x.size_correct)
    def pct(n, d):
        return round(n / d * 100, 1) if d else 0.0
    return AccuracyOut(
        total=total,
        color_accuracy=pct(color_ok, total),
        size_accuracy=pct(size_ok, total),
        overall_accuracy=pct(color_ok + size_ok, total * 2),
    )


def get_patterns(records: Iterable[OutcomeRecord], min_run: int = 3):
    store = SequenceStore.load(records)
    model = train(store)
    colors = list(model.color.seq[-settings.pattern_window * 5:])
    vote = repeat_predict(model.color.seq)
    return {
        'tags': list(model.patterns),
        'color_runs': runs(colors, k=min_run),
        'size_runs': runs(model.size.seq[-settings.pattern_window * 5:], k=min_run),
        'alternations': alternations(colors, L=4),
        'repeat': {'color': vote.symbol, 'confidence': vote.confidence} if vote else None,
    }


def get_stats(records: Iterable[OutcomeRecord]):
    store = SequenceStore.load(records)
    colors, sizes = store.colors, store.sizes
    trends = number_trends(store.numbers)
    return {
        'total': len(store),
        'latest_period': store.latest_period,
        'color_frequency': frequency(colors),
        'size_frequency': frequency(sizes),
        'color_entropy': entropy(colors),
        'color_momentum': momentum(colors, settings.momentum_window),
        'size_momentum': momentum(sizes, settings.momentum_window),
        'number_trends': asdict(trends) if trends else None,
    }
