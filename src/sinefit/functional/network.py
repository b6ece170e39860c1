"""
Forward evaluation of the single-hidden-layer network.

The network output for an input x is a weighted sum of shifted activations:

    y(x) = sum_j weights[j] * activation(x - centers[j])

Under the legacy window the sum runs over j = 1 .. len(centers) - 2, so the
first and last center never contribute.
"""

import numpy as np

from ..config import Window
from .activations import ScalarFunction


def center_window(num_centers: int, window: Window = Window.LEGACY) -> slice:
    """Slice of center indices that take part in the forward sum."""
    if Window(window) is Window.FULL:
        return slice(0, num_centers)
    return slice(1, max(num_centers - 1, 1))


def sample_window(num_samples: int, window: Window = Window.LEGACY) -> slice:
    """Slice of sample indices that are evaluated, scored and differentiated."""
    if Window(window) is Window.FULL:
        return slice(0, num_samples)
    return slice(0, num_samples - 1)


def evaluate(
    weights: np.ndarray,
    centers: np.ndarray,
    activation: ScalarFunction,
    x: float,
    window: Window = Window.LEGACY,
) -> float:
    """
    Network output for a single input.

    Args:
        weights: Weight per center, same length as centers
        centers: Center grid
        activation: Elementwise activation function
        x: Input value
        window: Which centers take part in the sum

    Returns:
        Output value as a Python float
    """
    sl = center_window(len(centers), window)
    w = np.asarray(weights[sl], dtype=np.float64)
    c = np.asarray(centers[sl], dtype=np.float64)
    if w.size == 0:
        return 0.0
    return float(np.dot(w, activation(x - c)))


def evaluate_batch(
    weights: np.ndarray,
    centers: np.ndarray,
    activation: ScalarFunction,
    inputs: np.ndarray,
    out: np.ndarray | None = None,
    window: Window = Window.LEGACY,
) -> np.ndarray:
    """
    Network output for every input in ``inputs``.

    Args:
        weights: Weight per center
        centers: Center grid
        activation: Elementwise activation function
        inputs: Inputs to evaluate (already restricted to the sample window)
        out: Optional preallocated buffer of len(inputs), written in place
        window: Which centers take part in the sum

    Returns:
        The output buffer
    """
    inputs = np.asarray(inputs, dtype=np.float64)
    if out is None:
        out = np.empty(inputs.shape[0], dtype=np.float64)
    elif out.shape != inputs.shape:
        raise ValueError(f"output buffer has shape {out.shape}, expected {inputs.shape}")

    sl = center_window(len(centers), window)
    w = np.asarray(weights[sl], dtype=np.float64)
    c = np.asarray(centers[sl], dtype=np.float64)
    if w.size == 0:
        out.fill(0.0)
        return out

    # (num_inputs, num_active_centers) design matrix
    basis = activation(inputs[:, None] - c[None, :])
    np.dot(basis, w, out=out)
    return out
