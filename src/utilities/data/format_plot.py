"""
Plot Formatting Utility

Provides a single helper function `format_plot` that applies the Moody chart
styling to a Matplotlib Axes: log-log axes, fixed limits, labelled friction
factor ticks, major and minor grid lines and an optional legend.
"""

from typing import Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.ticker import NullFormatter


def format_plot(
    ax: plt.Axes,
    title: Optional[str] = None,
    xlabel: Optional[str] = None,
    ylabel: Optional[str] = None,
    xlim: Optional[tuple[float, float]] = None,
    ylim: Optional[tuple[float, float]] = None,
    yticks: Optional[Sequence[str]] = None,
    grid: bool = True,
    grid_alpha: float = 0.4,
    legend: bool = False,
    fontsize: int = 10,
    title_fontsize: int = 13,
    loglog: bool = True,
    tight_layout: bool = True,
) -> None:
    """
    Apply consistent styling to a Matplotlib Axes.

    Args:
        ax (plt.Axes): The axes object to format.
        title (str, optional): Title of the plot. Defaults to None.
        xlabel (str, optional): Label for the X-axis. Defaults to None.
        ylabel (str, optional): Label for the Y-axis. Defaults to None.
        xlim (tuple, optional): X-axis limits. Defaults to None.
        ylim (tuple, optional): Y-axis limits. Defaults to None.
        yticks (Sequence[str], optional): Y tick values written as strings; each
            string is used both as the tick position and as its label.
        grid (bool, optional): Whether to display a grid. Defaults to True.
        grid_alpha (float, optional): Transparency of major grid lines. Defaults to 0.4.
        legend (bool, optional): Whether to display a legend. Defaults to False.
        fontsize (int, optional): Font size for axis labels and ticks. Defaults to 10.
        title_fontsize (int, optional): Font size for the title. Defaults to 13.
        loglog (bool, optional): Logarithmic scale on both axes. Defaults to True.
        tight_layout (bool, optional): Whether to apply tight layout. Defaults to True.

    Side Effects:
        Modifies the given Axes object in-place. Can also adjust the figure layout.
    """
    if loglog:
        ax.set_xscale("log")
        ax.set_yscale("log")

    if title:
        ax.set_title(title, fontsize=title_fontsize)
    if xlabel:
        ax.set_xlabel(xlabel, fontsize=fontsize)
    if ylabel:
        ax.set_ylabel(ylabel, fontsize=fontsize)

    if xlim:
        ax.set_xlim(*xlim)
    if ylim:
        ax.set_ylim(*ylim)

    ax.tick_params(axis="both", which="major", labelsize=fontsize, direction="out")
    ax.tick_params(axis="both", which="minor", direction="out")
    ax.minorticks_on()

    # explicit friction factor labels replace the log formatter
    if yticks:
        ax.set_yticks([float(tick) for tick in yticks])
        ax.set_yticklabels(list(yticks))
        ax.yaxis.set_minor_formatter(NullFormatter())

    if grid:
        ax.grid(True, which="major", alpha=grid_alpha)
        ax.grid(True, which="minor", alpha=grid_alpha * 0.3)

    if legend:
        ax.legend(fontsize=fontsize)

    if tight_layout:
        ax.figure.tight_layout()
