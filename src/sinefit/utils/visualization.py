"""
Visualization Utilities

Plots of a finished run: learned curve against the target, and loss history.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)

# Try to import matplotlib (optional dependency)
try:
    import matplotlib
    import matplotlib.pyplot as plt

    MATPLOTLIB_AVAILABLE = True
except ImportError:
    MATPLOTLIB_AVAILABLE = False
    plt = None
    matplotlib = None


def plot_fit(result, save_path: str | None = None, show: bool = True):
    """
    Plot learned outputs against the target values.

    Args:
        result: TrainingResult of a finished run
        save_path: Optional path to save the plot
        show: Whether to display the plot
    """
    if not MATPLOTLIB_AVAILABLE:
        logger.warning("Matplotlib not available. Install with: pip install matplotlib")
        return

    fig, axes = plt.subplots(1, 2, figsize=(12, 4))

    ax = axes[0]
    ax.plot(result.inputs, result.targets, "o-", label="Target", color="blue")
    ax.plot(result.inputs, result.outputs, "x--", label="Learned", color="red")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(f"Fit ({result.status.value}, iter {result.iteration})")
    ax.legend()
    ax.grid(True)

    plot_loss_history(result.loss_history, ax=axes[1])

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches="tight")
        logger.info("Plot saved to %s", save_path)

    if show:
        plt.show()
    else:
        plt.close(fig)


def plot_loss_history(losses: list[float], ax=None):
    """
    Plot the loss per iteration on a log scale.

    Args:
        losses: Loss value per iteration
        ax: Optional axes to draw into; a new figure is created otherwise

    Returns:
        The axes drawn into, or None without matplotlib
    """
    if not MATPLOTLIB_AVAILABLE:
        logger.warning("Matplotlib not available. Install with: pip install matplotlib")
        return None

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))

    losses = np.asarray(losses, dtype=np.float64)
    ax.semilogy(np.arange(losses.size), np.clip(losses, 1e-12, None), color="blue")
    ax.set_xlabel("Iteration")
    ax.set_ylabel("Loss (SSE)")
    ax.set_title("Training Loss")
    ax.grid(True)
    return ax
