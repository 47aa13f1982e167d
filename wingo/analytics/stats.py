import math
from collections import Counter
from dataclasses import dataclass
from typing import Sequence


def frequency(seq: Sequence[str]) -> dict[str, float]:
    """Empirical probability of each symbol, in first-seen order."""
    if not seq:
        return {}
    total = len(seq)
    return {k: c / total for k, c in Counter(seq).items()}


def top_frequency(freq: dict[str, float]) -> tuple[str, float] | None:
    best = None
    for k, p in freq.items():
        if best is None or p > best[1]:
            best = (k, p)
    return best


def momentum(seq: Sequence[str], window: int = 8) -> float:
    """Share of adjacent changes in the trailing window; 0 = persistent, 1 = oscillating."""
    if len(seq) < window or window < 2:
        return 0.5
    recent = seq[-window:]
    changes = sum(1 for a, b in zip(recent, recent[1:]) if a != b)
    return changes / (len(recent) - 1)


def trend_direction(nums: Sequence[int]) -> str:
    if len(nums) < 3:
        return "stable"
    half = len(nums) // 2
    first, second = nums[:half], nums[half:]
    avg_first = sum(first) / len(first)
    avg_second = sum(second) / len(second)
    if avg_second > avg_first + 0.5:
        return "increasing"
    if avg_second < avg_first - 0.5:
        return "decreasing"
    return "stable"


@dataclass(frozen=True)
class NumberTrends:
    average: float
    big_probability: float
    small_probability: float
    recent_trend: str


def number_trends(numbers: Sequence[int]) -> NumberTrends | None:
    if len(numbers) < 5:
        return None
    total = len(numbers)
    big = sum(1 for n in numbers if n >= 5)
    return NumberTrends(
        average=sum(numbers) / total,
        big_probability=big / total,
        small_probability=(total - big) / total,
        recent_trend=trend_direction(numbers[-10:]),
    )


def entropy(seq: Sequence[str]) -> float:
    """Shannon entropy (bits) of the symbol marginal."""
    H = 0.0
    for p in frequency(seq).values():
        H -= p * math.log(p, 2)
    return H
