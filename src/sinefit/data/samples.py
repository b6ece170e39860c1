"""
Training data generation

Builds the fixed training set, the center grid and the initial weights for a
run. Everything here is deterministic given the PRNG passed in.
"""

import logging
import time
from dataclasses import dataclass

import numpy as np

from ..config import InvalidConfig
from ..functional.activations import ScalarFunction
from ..nn.parameter import Parameter

logger = logging.getLogger(__name__)


def _readonly(values: np.ndarray) -> np.ndarray:
    arr = np.array(values, dtype=np.float64)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class TrainingSet:
    """
    Ordered (input, target) pairs.

    inputs[i] = (i + 1) / k and targets[i] = target(inputs[i]) for i = 0..k-1.
    Both arrays are read-only.
    """

    inputs: np.ndarray
    targets: np.ndarray

    def __post_init__(self):
        """Freeze the arrays and check the pairing."""
        object.__setattr__(self, "inputs", _readonly(self.inputs))
        object.__setattr__(self, "targets", _readonly(self.targets))
        if self.inputs.shape != self.targets.shape:
            raise ValueError(
                f"inputs {self.inputs.shape} and targets {self.targets.shape} differ in shape"
            )

    def __len__(self) -> int:
        return self.inputs.shape[0]


@dataclass(frozen=True)
class CenterGrid:
    """Ordered, read-only centers: centers[j] = j / n for j = 0..n-2."""

    centers: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "centers", _readonly(self.centers))

    def __len__(self) -> int:
        return self.centers.shape[0]


def make_rng(seed: int | None = None) -> tuple[np.random.Generator, int]:
    """
    Create the run's PRNG.

    Args:
        seed: Seed value; None seeds from the wall clock

    Returns:
        (generator, seed actually used)
    """
    if seed is None:
        seed = time.time_ns()
        logger.info("Seeding from wall clock: seed=%d", seed)
    return np.random.default_rng(seed), seed


def make_training_set(k: int, target: ScalarFunction) -> TrainingSet:
    """Sample ``target`` at i / k for i = 1..k."""
    if k < 2:
        raise InvalidConfig(f"k must be >= 2, got {k}")
    inputs = np.arange(1, k + 1, dtype=np.float64) / k
    return TrainingSet(inputs=inputs, targets=target(inputs))


def make_center_grid(n: int) -> CenterGrid:
    """Centers at j / n for j = 0..n-2."""
    if n < 2:
        raise InvalidConfig(f"n must be >= 2, got {n}")
    return CenterGrid(centers=np.arange(n - 1, dtype=np.float64) / n)


def init_weights(num_centers: int, rng: np.random.Generator) -> Parameter:
    """One weight per center, drawn independently from U[0, 1)."""
    return Parameter(rng.random(num_centers))


def generate(
    k: int, n: int, rng: np.random.Generator, target: ScalarFunction
) -> tuple[TrainingSet, CenterGrid, Parameter]:
    """
    Produce everything a run starts from.

    Args:
        k: Sample count (>= 2)
        n: Center count (>= 2); the grid holds n - 1 centers
        rng: Seeded generator used for the initial weights
        target: Function being approximated

    Returns:
        (training set, center grid, initial weights)
    """
    training_set = make_training_set(k, target)
    grid = make_center_grid(n)
    weights = init_weights(len(grid), rng)
    logger.debug("Generated %d samples, %d centers", len(training_set), len(grid))
    return training_set, grid, weights
