import numpy as np
import pytest

from lexprob import FreqDist


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


@pytest.fixture
def fruit_fd() -> FreqDist:
    return FreqDist(["apple", "banana", "apple", "apple", "pineapple"])
