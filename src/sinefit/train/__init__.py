"""
Training Module

The gradient-descent loop and its state.
"""

from .loop import Trainer, TrainingResult, TrainingState, TrainingStatus, train

__all__ = [
    "Trainer",
    "TrainingState",
    "TrainingStatus",
    "TrainingResult",
    "train",
]
