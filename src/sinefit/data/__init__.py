"""
Data Module

Training set, center grid and initial weight generation.
"""

from .samples import (
    CenterGrid,
    TrainingSet,
    generate,
    init_weights,
    make_center_grid,
    make_rng,
    make_training_set,
)

__all__ = [
    "TrainingSet",
    "CenterGrid",
    "make_rng",
    "make_training_set",
    "make_center_grid",
    "init_weights",
    "generate",
]
