"""
Result reporting

Writes the target values and the learned outputs as two labeled,
newline-separated lists.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)


def _write_values(sink: TextIO, label: str, values: Iterable[float]) -> None:
    sink.write(f"{label}: \n")
    for value in values:
        sink.write(f"{float(value):.6g}\n")


def report(sink: TextIO, targets: Iterable[float], learned: Iterable[float]) -> None:
    """
    Write "Actual Output" followed by "Learned Output" to ``sink``.

    Args:
        sink: Any writable text stream (console, file, StringIO)
        targets: Target values
        learned: Network outputs
    """
    _write_values(sink, "Actual Output", targets)
    sink.write("\n")
    _write_values(sink, "Learned Output", learned)


def write_report(
    path: str | Path, targets: Iterable[float], learned: Iterable[float]
) -> Path:
    """
    Write the report to a file, replacing any existing one.

    Returns:
        The path written
    """
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        report(f, targets, learned)
    logger.info("Report written to %s", path)
    return path
