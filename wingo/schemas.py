from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Literal, Optional


class _Out(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ColorProbabilities(_Out):
    green: float
    red: float
    violet: float


class SizeProbabilities(_Out):
    big: float
    small: float


class PredictionResult(_Out):
    color: Literal["green", "red", "violet"]
    color_confidence: float = Field(ge=0, le=100)
    color_probabilities: ColorProbabilities
    size: Literal["Big", "Small"]
    size_confidence: float = Field(ge=0, le=100)
    size_probabilities: SizeProbabilities
    overall_confidence: float = Field(ge=0, le=100)
    patterns_detected: list[str]


class ReplayItem(_Out):
    period: str
    predicted_color: str
    predicted_size: str
    actual_color: str
    actual_size: str
    actual_number: int
    color_correct: bool
    size_correct: bool


class AccuracyOut(_Out):
    total: int
    color_accuracy: float
    size_accuracy: float
    overall_accuracy: float


class ForecastOut(_Out):
    success: bool
    mode: str
    model_name: str
    latest_period: Optional[str] = None
    period: Optional[str] = None
    training_records: int = 0
    prediction: Optional[PredictionResult] = None
    recent_predictions: list[ReplayItem] = []
    error: Optional[str] = None
