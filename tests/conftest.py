"""
Pytest configuration and fixtures for sinefit tests
"""

import numpy as np
import pytest

from sinefit import TrainingConfig
from sinefit.data import generate
from sinefit.functional import sine


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: full-budget training runs (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def rng():
    """Seeded generator"""
    return np.random.default_rng(42)


@pytest.fixture
def config():
    """Default configuration with a fixed seed and a short budget"""
    return TrainingConfig(seed=1234, max_iter=200)


@pytest.fixture
def small_problem(rng):
    """Training set, grid and weights for k=8, n=6"""
    return generate(8, 6, rng, sine)


class RecordingActivation:
    """tanh that remembers every argument it was called with."""

    def __init__(self):
        self.calls = []

    def __call__(self, x):
        x = np.asarray(x, dtype=np.float64)
        self.calls.append(x.copy())
        return np.tanh(x)

    def arguments(self) -> np.ndarray:
        if not self.calls:
            return np.empty(0)
        return np.concatenate([np.ravel(c) for c in self.calls])


@pytest.fixture
def recording_activation():
    """Instrumented activation"""
    return RecordingActivation()
