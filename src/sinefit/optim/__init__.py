"""
Optimizers Module

Gradient descent and the loss-driven learning-rate controller.
"""

from .base import Optimizer
from .lr_scheduler import HalveOnIncrease
from .sgd import GradientDescent

__all__ = [
    "Optimizer",
    "GradientDescent",
    "HalveOnIncrease",
]
