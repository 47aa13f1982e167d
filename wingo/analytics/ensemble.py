"""Weighted-vote ensemble over the analytics signals.

Both forecasting modes run through :func:`predict`; what differs between them
lives in an :class:`~wingo.config.EnsembleMode` table (signal lists, weights,
confidence bands). Training produces an immutable :class:`TrainedModel`, so
nothing is shared between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from wingo.analytics.markov import MarkovTables
from wingo.analytics.patterns import detect_patterns, repeat_predict
from wingo.analytics.resampling import resample_next
from wingo.analytics.stats import NumberTrends, frequency, momentum, number_trends, top_frequency
from wingo.config import Band, EnsembleMode, Signal, settings
from wingo.core.logging import get_logger
from wingo.core.models import BIG, GREEN, RED, SMALL, VIOLET
from wingo.core.sequence import SequenceStore
from wingo.schemas import ColorProbabilities, PredictionResult, SizeProbabilities

log = get_logger(__name__)

# used when the winning symbol has no recorded model confidence
_DEFAULT_CONFIDENCE = {"color": 65.0, "size": 60.0}
_DEFAULT_SHARE = 50.0


@dataclass(frozen=True)
class Track:
    """One symbol track (colors or sizes) with its trained tables."""

    name: str
    seq: tuple[str, ...]
    markov: MarkovTables
    freq: dict[str, float]


@dataclass(frozen=True)
class TrainedModel:
    color: Track
    size: Track
    numbers: tuple[int, ...]
    trends: NumberTrends | None
    patterns: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.numbers)


def train(store: SequenceStore) -> TrainedModel:
    """Build every derived structure from a loaded sequence.

    Raises:
        InsufficientData: fewer records than ``settings.min_records``.
    """
    store.require()
    colors, sizes, numbers = tuple(store.colors), tuple(store.sizes), tuple(store.numbers)
    model = TrainedModel(
        color=Track("color", colors, MarkovTables.build(colors), frequency(colors)),
        size=Track("size", sizes, MarkovTables.build(sizes), frequency(sizes)),
        numbers=numbers,
        trends=number_trends(numbers),
        patterns=tuple(detect_patterns(colors, sizes, window=settings.pattern_window)),
    )
    log.debug(
        "trained",
        records=len(numbers),
        color_orders=[k for k in (1, 2, 3) if model.color.markov.trained(k)],
        size_orders=[k for k in (1, 2, 3) if model.size.markov.trained(k)],
    )
    return model


class VoteBox:
    """Weighted votes per symbol plus the confidences reported for each.

    Symbols keep their first-vote order; ties go to the earliest one.
    """

    def __init__(self):
        self.votes: dict[str, float] = {}
        self.confidences: dict[str, list[float]] = {}

    def add(self, symbol: str, weight: float, confidence: float | None = None):
        self.votes[symbol] = self.votes.get(symbol, 0.0) + weight
        if confidence is not None:
            self.confidences.setdefault(symbol, []).append(confidence)

    @property
    def total(self) -> float:
        return sum(self.votes.values())

    def winner(self, default: str) -> str:
        best, best_v = None, float("-inf")
        for sym, v in self.votes.items():
            if v > best_v:
                best, best_v = sym, v
        return best if best is not None else default

    def share(self, symbol: str) -> float:
        total = self.total
        return self.votes.get(symbol, 0.0) / total * 100 if total > 0 else 0.0

    def mean_confidence(self, symbol: str, default: float) -> float:
        confs = self.confidences.get(symbol)
        return sum(confs) / len(confs) if confs else default


def _cast(signal: Signal, track: Track, model: TrainedModel, mode: EnsembleMode,
          rng: np.random.Generator, box: VoteBox):
    seq = track.seq
    w = signal.weight
    if signal.kind == "markov":
        vote = track.markov.predict(seq, signal.order or 1)
        if vote:
            box.add(vote.symbol, w, vote.confidence)
    elif signal.kind == "frequency":
        top = top_frequency(track.freq)
        if top:
            box.add(top[0], w, top[1] * 100)
    elif signal.kind == "repeat":
        vote = repeat_predict(seq)
        if vote:
            box.add(vote.symbol, w, vote.confidence)
    elif signal.kind == "size_trend":
        t = model.trends
        if t is not None:
            sym = BIG if t.big_probability > 0.5 else SMALL
            box.add(sym, w, max(t.big_probability, t.small_probability) * 100)
    elif signal.kind == "resampling":
        dist = resample_next(seq, mode.resample_samples, rng, lookback=settings.resample_lookback)
        for sym, p in dist.items():
            box.add(sym, p * w)
    elif signal.kind == "momentum":
        # persistence boost for the current symbol
        if seq and momentum(seq, settings.momentum_window) < mode.momentum_threshold:
            box.add(seq[-1], w)
    elif signal.kind == "number_average":
        recent = model.numbers[-mode.number_window:]
        if recent:
            box.add(BIG if sum(recent) / len(recent) >= 5 else SMALL, w)
    else:
        raise ValueError(f"unknown signal kind {signal.kind!r}")


def collect(track: Track, signals: Sequence[Signal], model: TrainedModel, mode: EnsembleMode,
            rng: np.random.Generator) -> VoteBox:
    box = VoteBox()
    for signal in signals:
        _cast(signal, track, model, mode, rng, box)
    log.debug("votes", mode=mode.key, track=track.name, votes=box.votes)
    return box


def _confidence(box: VoteBox, winner: str, mode: EnsembleMode, track: str) -> float:
    if mode.confidence == "model_average":
        return box.mean_confidence(winner, _DEFAULT_CONFIDENCE[track])
    return box.share(winner) if box.total > 0 else _DEFAULT_SHARE


def _banded(value: float, band: Band, rng: np.random.Generator) -> float:
    jittered = value + float(rng.uniform(-band.jitter, band.jitter))
    return min(band.high, max(band.low, jittered))


def _color_probabilities(box: VoteBox, mode: EnsembleMode) -> ColorProbabilities:
    if box.total <= 0:
        return ColorProbabilities(green=33, red=33, violet=10)
    green, red = box.share(GREEN), box.share(RED)
    if mode.violet == "share":
        return ColorProbabilities(green=green, red=red, violet=box.share(VIOLET))
    violet = max(mode.violet_floor, 100 - green - red)
    # green and red give up whatever the floor added so the three still sum to 100
    rest = green + red
    if rest > 0:
        scale = (100 - violet) / rest
        green, red = green * scale, red * scale
    return ColorProbabilities(green=green, red=red, violet=violet)


def _size_probabilities(box: VoteBox) -> SizeProbabilities:
    if box.total <= 0:
        return SizeProbabilities(big=50, small=50)
    return SizeProbabilities(big=box.share(BIG), small=box.share(SMALL))


def predict(model: TrainedModel, mode: EnsembleMode, rng: np.random.Generator) -> PredictionResult:
    color_box = collect(model.color, mode.color_signals, model, mode, rng)
    size_box = collect(model.size, mode.size_signals, model, mode, rng)

    color = color_box.winner(default=GREEN)
    size = size_box.winner(default=BIG)
    color_conf = _confidence(color_box, color, mode, "color")
    size_conf = _confidence(size_box, size, mode, "size")

    return PredictionResult(
        color=color,
        color_confidence=_banded(color_conf, mode.color_band, rng),
        color_probabilities=_color_probabilities(color_box, mode),
        size=size,
        size_confidence=_banded(size_conf, mode.size_band, rng),
        size_probabilities=_size_probabilities(size_box),
        overall_confidence=_banded((color_conf + size_conf) / 2, mode.overall_band, rng),
        patterns_detected=[*model.patterns, *mode.extra_tags],
    )
