"""
Sum-of-squared-error loss and its gradient with respect to each weight.

Callers pass outputs/targets/inputs already restricted to the sample
window (see ``network.sample_window``); nothing here reads past the
shorter of ``outputs`` and ``targets``.
"""

import numpy as np

from .activations import ScalarFunction


def sse_loss(outputs: np.ndarray, targets: np.ndarray) -> float:
    """
    Sum of squared differences, not mean-normalized.

    Args:
        outputs: Network outputs
        targets: Target values; only the first len(outputs) entries are read

    Returns:
        Loss value (always >= 0)
    """
    outputs = np.asarray(outputs, dtype=np.float64)
    diff = outputs - np.asarray(targets[: outputs.shape[0]], dtype=np.float64)
    return float(np.dot(diff, diff))


def sse_gradient(
    outputs: np.ndarray,
    targets: np.ndarray,
    inputs: np.ndarray,
    activation: ScalarFunction,
    center: float,
) -> float:
    """
    Partial derivative of the SSE loss with respect to the weight on ``center``.

    The network output is linear in each weight, so the derivative is
    2 * sum_i (outputs[i] - targets[i]) * activation(inputs[i] - center).
    """
    outputs = np.asarray(outputs, dtype=np.float64)
    m = outputs.shape[0]
    residual = outputs - np.asarray(targets[:m], dtype=np.float64)
    x = np.asarray(inputs[:m], dtype=np.float64)
    return 2.0 * float(np.dot(residual, activation(x - center)))


def sse_gradients(
    outputs: np.ndarray,
    targets: np.ndarray,
    inputs: np.ndarray,
    activation: ScalarFunction,
    centers: np.ndarray,
    out: np.ndarray | None = None,
) -> np.ndarray:
    """
    Gradient for every center at once.

    Equivalent to calling ``sse_gradient`` per center, evaluated against the
    same ``outputs`` array.

    Args:
        outputs: Network outputs for this iteration
        targets: Target values
        inputs: Training inputs
        activation: Elementwise activation function
        centers: Center grid; one gradient entry per center
        out: Optional preallocated buffer of len(centers), written in place

    Returns:
        The gradient buffer
    """
    outputs = np.asarray(outputs, dtype=np.float64)
    m = outputs.shape[0]
    residual = outputs - np.asarray(targets[:m], dtype=np.float64)
    x = np.asarray(inputs[:m], dtype=np.float64)
    c = np.asarray(centers, dtype=np.float64)

    if out is None:
        out = np.empty(c.shape[0], dtype=np.float64)
    elif out.shape != c.shape:
        raise ValueError(f"gradient buffer has shape {out.shape}, expected {c.shape}")

    # (num_centers, num_samples) basis, contracted against the residual
    basis = activation(x[None, :] - c[:, None])
    np.dot(basis, residual, out=out)
    out *= 2.0
    return out
