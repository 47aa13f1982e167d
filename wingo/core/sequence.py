from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from wingo.config import settings
from wingo.core.models import OutcomeRecord
from wingo.core.validation import is_valid_period


class InsufficientData(Exception):
    """Raised when a sequence is too short to train or predict on."""

    def __init__(self, available: int, required: int):
        super().__init__(f"need at least {required} records, got {available}")
        self.available = available
        self.required = required


@dataclass(frozen=True)
class SequenceStore:
    """Chronologically ordered outcome records for a single forecasting run."""

    records: tuple[OutcomeRecord, ...]

    @classmethod
    def load(cls, records: Iterable[OutcomeRecord]) -> SequenceStore:
        # sorted() is stable, duplicates keep their input order
        return cls(tuple(sorted(records, key=lambda r: r.period_key)))

    def __len__(self) -> int:
        return len(self.records)

    def require(self, minimum: int | None = None) -> SequenceStore:
        minimum = settings.min_records if minimum is None else minimum
        if len(self.records) < minimum:
            raise InsufficientData(len(self.records), minimum)
        return self

    @property
    def colors(self) -> list[str]:
        return [r.base_color for r in self.records]

    @property
    def sizes(self) -> list[str]:
        return [r.size for r in self.records]

    @property
    def numbers(self) -> list[int]:
        return [r.number for r in self.records]

    @property
    def latest_period(self) -> str | None:
        return self.records[-1].period if self.records else None

    def next_period(self) -> str | None:
        latest = self.latest_period
        if not is_valid_period(latest):
            return None
        return str(int(latest) + 1)

    def before(self, index: int) -> SequenceStore:
        return SequenceStore(self.records[:index])
