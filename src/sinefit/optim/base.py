"""
Base Optimizer class

Holds parameter groups in the style of torch.optim.Optimizer, over numpy
arrays.
"""

from collections.abc import Iterable
from typing import Any

import numpy as np


class Optimizer:
    """
    Base class for all optimizers.

    Parameters are numpy arrays carrying a ``.grad`` array. Hyperparameters
    live in ``param_groups`` so schedulers can adjust them between steps.
    """

    def __init__(self, params: Iterable[np.ndarray], defaults: dict[str, Any]):
        """
        Initialize optimizer.

        Args:
            params: Iterable of parameter arrays to optimize
            defaults: Dictionary of default hyperparameter values
        """
        self.defaults = defaults
        self.param_groups: list = []

        param_groups = list(params)
        if len(param_groups) == 0:
            raise ValueError("Optimizer got an empty parameter list")

        # If first element is a dict, it's a parameter group
        if isinstance(param_groups[0], dict):
            self.param_groups = param_groups
        else:
            self.param_groups = [{"params": param_groups}]

        for group in self.param_groups:
            for key, value in self.defaults.items():
                if key not in group:
                    group[key] = value
            for p in group["params"]:
                if not isinstance(p, np.ndarray):
                    raise TypeError("Optimizer can only optimize numpy arrays")

    def zero_grad(self):
        """Reset the gradient buffer of every parameter, allocating it if missing."""
        for group in self.param_groups:
            for p in group["params"]:
                if hasattr(p, "zero_grad"):
                    p.zero_grad()
                elif getattr(p, "grad", None) is not None:
                    p.grad.fill(0.0)

    def step(self):
        """
        Perform a single optimization step.

        Must be implemented by subclasses.
        """
        raise NotImplementedError

    def state_dict(self) -> dict[str, Any]:
        """
        Return the hyperparameters of every group as a dict.

        Parameter arrays themselves are left out.
        """
        return {
            "param_groups": [
                {key: value for key, value in group.items() if key != "params"}
                for group in self.param_groups
            ],
        }

    def load_state_dict(self, state_dict: dict[str, Any]):
        """
        Load hyperparameters produced by ``state_dict``.

        Args:
            state_dict: Dictionary produced by ``state_dict``
        """
        for group, saved in zip(self.param_groups, state_dict.get("param_groups", [])):
            group.update(saved)

    def __repr__(self):
        """Return a debug representation."""

        return f"{self.__class__.__name__}(lr={self.param_groups[0].get('lr', 'N/A')})"
