import numpy as np
import pytest

from wingo.core.models import OutcomeRecord

# first 100 digits of pi, a fixed but irregular outcome stream
PI_DIGITS = [int(c) for c in (
    "3141592653589793238462643383279502884197169399375105820974944592"
    "307816406286208998628034825342117067"
)]

ALTERNATING = [2, 1, 2, 1, 2, 1, 2, 1, 2, 1]  # red, green, ... (Small throughout)


def records_for(numbers, start=20240001):
    return [OutcomeRecord.from_number(start + i, n) for i, n in enumerate(numbers)]


@pytest.fixture
def make_records():
    return records_for


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def mixed_records():
    return records_for(PI_DIGITS[:60])


@pytest.fixture
def alternating_records():
    return records_for(ALTERNATING)
