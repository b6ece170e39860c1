"""
Parameter class for the weight vector

A numpy array that carries its own gradient buffer.
"""

import numpy as np


class Parameter(np.ndarray):
    """
    A Parameter is a float64 numpy array with a ``.grad`` buffer.

    The gradient buffer is allocated once, on first ``zero_grad``, and is
    overwritten in place afterwards.
    """

    def __new__(cls, data: np.ndarray):
        """
        Create a new Parameter from a numpy array.

        Args:
            data: Numpy array containing parameter values
        """
        obj = np.array(data, dtype=np.float64).view(cls)
        obj.grad = None
        return obj

    def __array_finalize__(self, obj):
        """Called when creating new arrays from this one"""
        if obj is None:
            return
        self.grad = getattr(obj, "grad", None)

    def zero_grad(self):
        """Clear gradients"""
        if self.grad is not None:
            self.grad.fill(0.0)
        else:
            self.grad = np.zeros(self.shape, dtype=np.float64)

    def __repr__(self):
        """Return a debug representation."""

        return f"Parameter(shape={self.shape}, grad={'set' if self.grad is not None else 'None'})"
