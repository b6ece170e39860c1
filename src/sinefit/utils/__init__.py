"""
Utilities Module

Reporting, result persistence and plotting.
"""

from .checkpoint import load_result, save_result
from .report import report, write_report
from .visualization import MATPLOTLIB_AVAILABLE, plot_fit, plot_loss_history

__all__ = [
    "report",
    "write_report",
    "save_result",
    "load_result",
    "plot_fit",
    "plot_loss_history",
    "MATPLOTLIB_AVAILABLE",
]
