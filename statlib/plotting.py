"""Render scatter figures of paired series annotated with their correlation.

Plotting receives precomputed results; the only statistic it asks for is the
correlation, and only when the caller did not pass one in.
"""

from __future__ import annotations

import os
import re
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from .reporting import format_result
from .result import StatResult
from .stats.bivariate import coefficient_correlation

FIGURE_DPI = 300
FIGSIZE_SINGLE = (7.0, 4.2)


def setup_plot_style() -> None:
    """Apply a serif, grayscale style to matplotlib ``rcParams``."""
    plt.rcParams.update(
        {
            "font.family": "serif",
            "font.serif": ["Times New Roman", "DejaVu Serif"],
            "font.size": 12.0,
            "axes.titlesize": 13.0,
            "axes.labelsize": 12.0,
            "axes.linewidth": 1.2,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "xtick.labelsize": 11.0,
            "ytick.labelsize": 11.0,
            "grid.alpha": 0.20,
            "grid.linestyle": ":",
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
        }
    )


def sanitize_filename(name: str) -> str:
    text = re.sub(r"\s+", "_", str(name).strip())
    text = re.sub(r"[^A-Za-z0-9._-]+", "_", text)
    text = re.sub(r"_+", "_", text).strip("._")
    return text or "figure"


def plot_paired_series(
    x: Sequence,
    y: Sequence,
    title: str,
    output_dir: str = "output",
    result: Optional[StatResult] = None,
    xlabel: str = "x",
    ylabel: str = "y",
) -> str:
    """Save a scatter plot of ``y`` against ``x``.

    Args:
        x (Sequence): Independent series.
        y (Sequence): Dependent series, same length as ``x``.
        title (str): Statistic label; also used for the file name.
        output_dir (str, optional): Directory for the PNG. Defaults to
            ``"output"``.
        result (StatResult, optional): Precomputed correlation. Computed with
            :func:`coefficient_correlation` when omitted.
        xlabel (str, optional): X-axis label.
        ylabel (str, optional): Y-axis label.

    Returns:
        str: Path to the saved PNG file.

    Raises:
        ValueError: If ``x`` and ``y`` differ in length.

    Note:
        A failed correlation is still plotted; the diagnostic replaces the
        value in the figure title.
    """
    if len(x) != len(y):
        raise ValueError(
            f"Cannot plot series of different lengths ({len(x)} vs {len(y)})."
        )
    if result is None:
        result = coefficient_correlation(x, y)

    setup_plot_style()
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)

    fig, ax = plt.subplots(figsize=FIGSIZE_SINGLE)
    ax.scatter(x_arr, y_arr, s=30, facecolors="white", edgecolors="black", linewidths=1.0)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.set_title(format_result(title, result, precision=4))
    ax.grid(True)

    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, f"{sanitize_filename(title)}.png")
    fig.savefig(path)
    plt.close(fig)
    return path
