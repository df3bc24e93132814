"""
Plot Saving Utility

Saves Matplotlib figures under the project's figure folder, optionally
appending a timestamp so repeated runs do not overwrite each other.
"""

import logging
from datetime import datetime
from pathlib import Path

import matplotlib.pyplot as plt

from consts import FIGS_PATH

logger = logging.getLogger(__name__)


def save_plot(
    fig: plt.Figure,
    folder: Path = FIGS_PATH,
    name: str = "plot",
    timestamp: bool = False,
    dpi: int = 300,
    close: bool = True,
) -> Path:
    """
    Save a Matplotlib figure as PNG.

    Args:
        fig (plt.Figure): The figure to save.
        folder (Path, optional): Target folder; relative paths resolve against
            the project figure folder. Created if missing.
        name (str, optional): Base filename without extension. Defaults to "plot".
        timestamp (bool, optional): Append a timestamp to the filename. Defaults to False.
        dpi (int, optional): Output resolution. Defaults to 300.
        close (bool, optional): Close the figure after saving. Defaults to True.

    Returns:
        Path: Full path to the saved file.
    """
    folder = Path(folder)
    if not folder.is_absolute():
        folder = FIGS_PATH / folder
    folder.mkdir(parents=True, exist_ok=True)

    if timestamp:
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"{name}_{ts}.png"
    else:
        filename = f"{name}.png"

    filepath = folder / filename
    fig.savefig(filepath, dpi=dpi, bbox_inches="tight")
    if close:
        plt.close(fig)

    logger.info("plot saved to %s", filepath)
    return filepath
