"""
Chart helpers for list benchmark results.

Grouped bar chart of per-operation timings for both container variants.
Figures are returned to the caller; nothing is written to disk here.
"""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend for server / CI environments
import matplotlib.pyplot as plt

from .constants import ARRAY_LIST, LINKED_LIST
from .report import comparison_table
from .results import ResultRecord

VARIANT_COLORS = {
    ARRAY_LIST: '#2E86AB',   # Steel blue
    LINKED_LIST: '#F18F01',  # Orange
}


def plot_comparison(
    results: Iterable[ResultRecord],
    ax: Optional[plt.Axes] = None,
    log_scale: bool = True,
) -> plt.Figure:
    """
    Grouped bar chart, one bar pair per operation, in microseconds.

    Parameters
    ----------
    results : iterable of ResultRecord
        Records from :meth:`ListBenchmark.get_results`.
    ax : matplotlib Axes, optional
        Axes to draw into.  A new figure is created when omitted.
    log_scale : bool
        Use a log y-axis; timings often span several orders of magnitude.

    Returns
    -------
    matplotlib.figure.Figure
    """
    table = comparison_table(results)

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 5))
    else:
        fig = ax.figure

    x = np.arange(len(table))
    width = 0.35
    for offset, label in ((-width / 2, ARRAY_LIST), (width / 2, LINKED_LIST)):
        # Clamp to 1 us so sub-microsecond bars stay visible on a log axis
        values = np.maximum(table[label].to_numpy(dtype=float), 1.0)
        ax.bar(x + offset, values, width, label=label,
               color=VARIANT_COLORS[label], edgecolor='white')

    ax.set_xticks(x)
    ax.set_xticklabels(table.index, rotation=30, ha='right')
    ax.set_ylabel('Time (us)')
    ax.set_title('ArrayList vs LinkedList')
    if log_scale:
        ax.set_yscale('log')
    ax.grid(True, alpha=0.3, axis='y', linestyle='--')
    ax.legend()
    fig.tight_layout()
    return fig
