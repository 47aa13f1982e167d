from typing import Literal
from pydantic import BaseModel
from pydantic_settings import BaseSettings
import os

class Settings(BaseSettings):
    min_records: int = int(os.getenv("MIN_RECORDS", 10))
    pattern_window: int = int(os.getenv("PATTERN_WINDOW", 10))
    resample_lookback: int = int(os.getenv("RESAMPLE_LOOKBACK", 30))
    momentum_window: int = int(os.getenv("MOMENTUM_WINDOW", 8))
    history_size: int = int(os.getenv("HISTORY_SIZE", 20))
    seed: int | None = int(os.environ["SEED"]) if os.getenv("SEED") else None
    wingo_env: str = os.getenv("WINGO_ENV", "development")
    wingo_log_level: str = os.getenv("WINGO_LOG_LEVEL", "INFO")

settings = Settings()


# ---------------- Ensemble weighting tables ----------------
SignalKind = Literal["markov", "frequency", "repeat", "size_trend", "resampling", "momentum", "number_average"]


class Signal(BaseModel):
    kind: SignalKind
    weight: float
    order: int | None = None


class Band(BaseModel):
    low: float
    high: float
    jitter: float


class EnsembleMode(BaseModel):
    key: str
    name: str
    color_signals: list[Signal]
    size_signals: list[Signal]
    confidence: Literal["model_average", "vote_share"]
    color_band: Band
    size_band: Band
    overall_band: Band
    violet: Literal["share", "complement"] = "share"
    violet_floor: float = 0.0
    extra_tags: list[str] = []
    resample_samples: int = 500
    momentum_threshold: float = 0.3
    number_window: int = 20


MODEL_1 = EnsembleMode(
    key="model_1",
    name="Markov Chain",
    color_signals=[
        Signal(kind="markov", order=1, weight=1.0),
        Signal(kind="markov", order=2, weight=1.2),
        Signal(kind="markov", order=3, weight=1.5),
        Signal(kind="frequency", weight=0.8),
        Signal(kind="repeat", weight=1.3),
    ],
    size_signals=[
        Signal(kind="markov", order=1, weight=1.0),
        Signal(kind="markov", order=2, weight=1.2),
        Signal(kind="markov", order=3, weight=1.5),
        Signal(kind="size_trend", weight=1.0),
    ],
    confidence="model_average",
    color_band=Band(low=55, high=85, jitter=3),
    size_band=Band(low=52, high=82, jitter=3),
    overall_band=Band(low=55, high=80, jitter=2),
)

MODEL_2 = EnsembleMode(
    key="model_2",
    name="LSTM Ensemble",
    color_signals=[
        Signal(kind="resampling", weight=2.0),
        Signal(kind="markov", order=3, weight=1.8),
        Signal(kind="markov", order=2, weight=1.5),
        Signal(kind="momentum", weight=1.2),
    ],
    size_signals=[
        Signal(kind="resampling", weight=2.0),
        Signal(kind="markov", order=3, weight=1.8),
        Signal(kind="markov", order=2, weight=1.5),
        Signal(kind="momentum", weight=1.2),
        Signal(kind="number_average", weight=0.8),
    ],
    confidence="vote_share",
    color_band=Band(low=58, high=88, jitter=4),
    size_band=Band(low=55, high=85, jitter=3),
    overall_band=Band(low=58, high=83, jitter=3),
    violet="complement",
    violet_floor=5.0,
    extra_tags=["Monte Carlo simulation", "Momentum analysis"],
)

MODES = {m.key: m for m in (MODEL_1, MODEL_2)}


def get_mode(key: str) -> EnsembleMode:
    try:
        return MODES[key]
    except KeyError:
        raise ValueError(f"unknown model {key!r}, expected one of {sorted(MODES)}") from None
