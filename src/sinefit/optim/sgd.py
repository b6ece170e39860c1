"""
Gradient Descent Optimizer

Full-batch gradient descent with no momentum.
"""

from collections.abc import Iterable

import numpy as np

from .base import Optimizer


class GradientDescent(Optimizer):
    """
    Plain gradient descent.

    Implements: param = param - lr * grad, for every entry at once. The
    gradient buffer must already hold the gradient of the pre-update
    parameters; it is left in place after the step.
    """

    def __init__(self, params: Iterable[np.ndarray], lr: float = 0.01):
        """
        Initialize the optimizer.

        Args:
            params: Iterable of parameter arrays to optimize
            lr: Learning rate (default: 0.01)
        """
        if not lr > 0:
            raise ValueError(f"Invalid learning rate: {lr}")
        super().__init__(params, {"lr": lr})

    @property
    def lr(self) -> float:
        """Learning rate of the first parameter group."""
        return self.param_groups[0]["lr"]

    def step(self):
        """Perform a single update."""
        for group in self.param_groups:
            lr = group["lr"]
            for p in group["params"]:
                grad = getattr(p, "grad", None)
                if grad is None:
                    continue
                # In-place so every holder of the array sees the update
                p -= lr * grad

