"""Scalar activation and target functions, looked up by name."""

from collections.abc import Callable

import numpy as np

from ..config import InvalidConfig

ScalarFunction = Callable[[np.ndarray], np.ndarray]


def tanh(x: np.ndarray) -> np.ndarray:
    """
    Hyperbolic tangent activation.
    Accepts scalars or arrays.
    """
    return np.tanh(x)


def sine(x: np.ndarray) -> np.ndarray:
    """
    Sine, the default function being approximated.
    Accepts scalars or arrays.
    """
    return np.sin(x)


_FUNCTIONS: dict[str, ScalarFunction] = {
    "tanh": tanh,
    "sine": sine,
}


def register_function(name: str, fn: ScalarFunction) -> None:
    """
    Make a function selectable by name from a TrainingConfig.

    Args:
        name: Lookup key
        fn: Elementwise function accepting numpy arrays
    """
    if not callable(fn):
        raise TypeError(f"{name!r} is not callable")
    _FUNCTIONS[name] = fn


def get_function(name: str) -> ScalarFunction:
    """Return the function registered under ``name``."""
    try:
        return _FUNCTIONS[name]
    except KeyError:
        raise InvalidConfig(
            f"unknown function {name!r}, expected one of {sorted(_FUNCTIONS)}"
        ) from None
