from collections import Counter
from typing import Sequence

import numpy as np


def resample_next(seq: Sequence[str], samples: int, rng: np.random.Generator, lookback: int = 30) -> dict[str, float]:
    """Bootstrap estimate of the next-symbol distribution inside the trailing window.

    Each draw picks a position in the pool (never the last one) and records
    the symbol that follows it. Output varies with the generator state.
    """
    pool = list(seq[-lookback:])
    if len(pool) < 2 or samples <= 0:
        return {}
    idx = rng.integers(0, len(pool) - 1, size=samples)
    counts = Counter(pool[i + 1] for i in idx)
    return {k: c / samples for k, c in counts.items()}
