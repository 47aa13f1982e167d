from typing import Literal

from pydantic import BaseModel, Field, field_validator

GREEN, RED, VIOLET = "green", "red", "violet"
BIG, SMALL = "Big", "Small"


def color_for(number: int) -> str:
    if number == 0:
        return "red+violet"
    if number == 5:
        return "green+violet"
    return GREEN if number % 2 == 1 else RED


def size_for(number: int) -> str:
    return BIG if number >= 5 else SMALL


def base_color(color: str) -> str:
    """Collapse combined tags such as 'green+violet' to their base color."""
    c = color.lower()
    if GREEN in c:
        return GREEN
    if RED in c:
        return RED
    if c == VIOLET:
        return VIOLET
    return RED


def outcome_color(color: str) -> str:
    """Color used when scoring a prediction: any violet-tagged red counts as violet."""
    c = color.lower()
    if GREEN in c:
        return GREEN
    if VIOLET in c:
        return VIOLET
    return RED


class OutcomeRecord(BaseModel):
    period: str
    number: int = Field(ge=0, le=9)
    color: str
    size: Literal["Big", "Small"]

    @field_validator("period", mode="before")
    @classmethod
    def _period_as_str(cls, v):
        return str(v) if isinstance(v, int) else v

    @classmethod
    def from_number(cls, period: str | int, number: int) -> "OutcomeRecord":
        return cls(period=period, number=number, color=color_for(number), size=size_for(number))

    @property
    def period_key(self) -> int:
        # non-numeric periods sort first
        try:
            return int(self.period)
        except ValueError:
            return 0

    @property
    def base_color(self) -> str:
        return base_color(self.color)
