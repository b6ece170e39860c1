"""
Training configuration

Hyperparameters for a single fitting run, with JSON round-tripping.
"""

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class InvalidConfig(ValueError):
    """Raised when a configuration cannot describe a valid training run."""


class Window(str, Enum):
    """
    Index window used by the forward pass and the loss/gradient sums.

    LEGACY skips the first and last center in the forward sum and the last
    training sample in the loss and gradient sums. FULL uses every center
    and every sample.
    """

    LEGACY = "legacy"
    FULL = "full"


@dataclass
class TrainingConfig:
    """
    Configuration for a fitting run.

    Args:
        k: Number of training samples (default: 20)
        n: Center count; the network has n - 1 centers (default: 20)
        max_iter: Iteration budget (default: 20000)
        eta: Initial learning rate (default: 0.01)
        eps: Early-stop threshold on the summed squared error (default: 0.001)
        decay: Divisor applied to the learning rate when the loss grows (default: 2.0)
        seed: PRNG seed; None seeds from the wall clock
        activation: Registered name of the activation function (default: 'tanh')
        target: Registered name of the function being approximated (default: 'sine')
        window: Index window, 'legacy' or 'full' (default: 'legacy')
        log_every: Emit a debug line every N iterations (default: 1000)
    """

    k: int = 20
    n: int = 20
    max_iter: int = 20000
    eta: float = 0.01
    eps: float = 0.001
    decay: float = 2.0
    seed: int | None = None
    activation: str = "tanh"
    target: str = "sine"
    window: Window = Window.LEGACY
    log_every: int = 1000

    def __post_init__(self):
        """Coerce the window to its enum."""
        try:
            self.window = Window(self.window)
        except ValueError:
            raise InvalidConfig(
                f"window must be one of {[w.value for w in Window]}, got {self.window!r}"
            ) from None

    def validate(self) -> "TrainingConfig":
        """
        Check every field, raising InvalidConfig on the first bad one.

        Returns:
            self, so calls can be chained
        """
        from .functional.activations import get_function

        if self.k < 2:
            raise InvalidConfig(f"k must be >= 2, got {self.k}")
        if self.n < 2:
            raise InvalidConfig(f"n must be >= 2, got {self.n}")
        if self.max_iter < 1:
            raise InvalidConfig(f"max_iter must be >= 1, got {self.max_iter}")
        if not self.eta > 0:
            raise InvalidConfig(f"eta must be positive, got {self.eta}")
        if self.eps < 0:
            raise InvalidConfig(f"eps must be non-negative, got {self.eps}")
        if not self.decay > 1:
            raise InvalidConfig(f"decay must be > 1, got {self.decay}")
        if self.log_every < 1:
            raise InvalidConfig(f"log_every must be >= 1, got {self.log_every}")
        if self.seed is not None and (not isinstance(self.seed, int) or self.seed < 0):
            raise InvalidConfig(f"seed must be None or a non-negative integer, got {self.seed!r}")

        get_function(self.activation)
        get_function(self.target)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return {
            "k": self.k,
            "n": self.n,
            "max_iter": self.max_iter,
            "eta": self.eta,
            "eps": self.eps,
            "decay": self.decay,
            "seed": self.seed,
            "activation": self.activation,
            "target": self.target,
            "window": self.window.value,
            "log_every": self.log_every,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "TrainingConfig":
        """Create config from dictionary."""
        unknown = set(d) - set(cls.__dataclass_fields__)
        if unknown:
            raise InvalidConfig(f"unknown config keys: {sorted(unknown)}")
        return cls(**d)

    def save(self, path: str | Path) -> None:
        """Save config to JSON file."""
        path = Path(path)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: str | Path) -> "TrainingConfig":
        """Load config from JSON file."""
        path = Path(path)
        with open(path) as f:
            return cls.from_dict(json.load(f))
