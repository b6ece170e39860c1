"""
Result persistence

Save and load finished runs using numpy's .npz format.
"""

import logging
from pathlib import Path
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)

_ARRAYS = ("weights", "outputs", "targets", "inputs", "centers", "loss_history")


def save_result(result: Any, filepath: str | Path = "result.npz") -> Path:
    """
    Save a TrainingResult.

    Args:
        result: TrainingResult to persist
        filepath: Destination; a .npz suffix is added if missing

    Returns:
        The path written
    """
    filepath = Path(filepath)
    if filepath.suffix != ".npz":
        filepath = filepath.with_suffix(".npz")

    arrays = {name: np.asarray(getattr(result, name), dtype=np.float64) for name in _ARRAYS}
    np.savez_compressed(
        str(filepath),
        status=np.array(result.status.value),
        loss=np.array([result.loss], dtype=np.float64),
        learning_rate=np.array([result.learning_rate], dtype=np.float64),
        iteration=np.array([result.iteration], dtype=np.int64),
        # -1 marks "no seed recorded"
        seed=np.array([-1 if result.seed is None else result.seed], dtype=np.int64),
        **arrays,
    )
    logger.info("Result saved to %s", filepath)
    return filepath


def load_result(filepath: str | Path):
    """
    Load a result written by ``save_result``.

    Returns:
        TrainingResult
    """
    from ..train.loop import TrainingResult, TrainingStatus

    filepath = Path(filepath)
    with np.load(str(filepath)) as data:
        seed = int(data["seed"][0])
        return TrainingResult(
            status=TrainingStatus(str(data["status"])),
            weights=data["weights"],
            outputs=data["outputs"],
            targets=data["targets"],
            inputs=data["inputs"],
            centers=data["centers"],
            loss=float(data["loss"][0]),
            learning_rate=float(data["learning_rate"][0]),
            iteration=int(data["iteration"][0]),
            seed=None if seed < 0 else seed,
            loss_history=data["loss_history"].tolist(),
        )
