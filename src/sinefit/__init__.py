"""
sinefit - fit sin with a single hidden layer of shifted tanh units.

- config: TrainingConfig, Window and InvalidConfig
- data: training set, center grid and initial weights
- functional: activations, forward pass, SSE loss and gradient
- optim: gradient descent and the loss-driven learning-rate controller
- train: the training loop
- utils: reporting, result persistence, plotting
"""

import sinefit.data as data
import sinefit.functional as functional
import sinefit.optim as optim
import sinefit.utils as utils
from sinefit.config import InvalidConfig, TrainingConfig, Window
from sinefit.train import Trainer, TrainingResult, TrainingState, TrainingStatus, train

__all__ = [
    "InvalidConfig",
    "TrainingConfig",
    "Window",
    "Trainer",
    "TrainingState",
    "TrainingStatus",
    "TrainingResult",
    "train",
    # Submodules
    "data",
    "functional",
    "optim",
    "utils",
]

try:
    from sinefit._version import version as __version__
except ImportError:
    __version__ = "0.1.0.dev0"  # fallback when _version.py not yet generated
