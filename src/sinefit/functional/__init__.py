"""
Functional API

Pure functions used by the training loop: activations, forward pass, loss.
"""

from .activations import (
    ScalarFunction,
    get_function,
    register_function,
    sine,
    tanh,
)
from .loss import (
    sse_gradient,
    sse_gradients,
    sse_loss,
)
from .network import (
    center_window,
    evaluate,
    evaluate_batch,
    sample_window,
)

__all__ = [
    # Activations
    "ScalarFunction",
    "get_function",
    "register_function",
    "sine",
    "tanh",
    # Network
    "center_window",
    "sample_window",
    "evaluate",
    "evaluate_batch",
    # Loss
    "sse_loss",
    "sse_gradient",
    "sse_gradients",
]
