import logging
from pathlib import Path
from typing import Iterable, Optional

import numpy as np
import matplotlib.pyplot as plt

from colebrook import minimum_turbulent_friction
from consts import (
    CHART_EPS_TICKS,
    CHART_F_LIMITS,
    CHART_F_TICKS,
    CHART_RE_LIMITS,
    EPS_MAX,
    FIGS_PATH,
    NUM_PLOT_POINTS,
    RE_LAM_MAX,
    RE_TURB_MIN,
)
from coupling import Coupling
from errors import NoSolutionError
from friction_factor import FrictionFactorSolver, SolverOptions
from regime import FlowSolution

from utilities.data.palettes import MoodyPalette
from utilities.data.format_plot import format_plot
from utilities.data.save_plot import save_plot

logger = logging.getLogger(__name__)


class MoodyChart:
    """
    Schematic Moody diagram with an explicit figure.

    Each chart owns its figure and axes; nothing is shared between charts,
    so solutions from separate calls are added to the chart they belong to.
    """

    def __init__(
        self,
        eps: float = 0.0,
        solver: Optional[FrictionFactorSolver] = None,
        num_points: int = NUM_PLOT_POINTS,
    ):
        self.eps = min(eps, EPS_MAX)
        self.solver = solver or FrictionFactorSolver(
            SolverOptions(notify_roughness_clamp=False)
        )
        self.num_points = num_points
        self.palette = MoodyPalette()
        self.fig, self.ax = plt.subplots(figsize=(8, 6))
        self._draw_reference()

    def turbulent_curve(self, eps: float) -> tuple[np.ndarray, np.ndarray]:
        re = np.logspace(
            np.log10(RE_TURB_MIN), np.log10(CHART_RE_LIMITS[1]), self.num_points
        )
        f = np.array([self.solver.re_to_f(re_i, eps).f for re_i in re])
        return re, f

    def laminar_line(self) -> tuple[np.ndarray, np.ndarray]:
        re = np.logspace(np.log10(CHART_RE_LIMITS[0]), np.log10(RE_LAM_MAX), 2)
        return re, 64 / re

    def rough_boundary(self, num_points: int = 30) -> tuple[np.ndarray, np.ndarray]:
        # just off the fully rough asymptote of each roughness
        turbulent_only = self.solver.with_options(
            check_laminar=False, notify_roughness_clamp=False
        )
        re, f = [], []
        for eps in np.logspace(np.log10(4e-5), np.log10(EPS_MAX), num_points):
            f_i = 1.01 * minimum_turbulent_friction(eps)
            try:
                solution = turbulent_only.f_to_re(f_i, eps)[0]
            except NoSolutionError:
                logger.debug("rough boundary: no turbulent root for eps=%g", eps)
                continue
            re.append(solution.reynolds)
            f.append(f_i)
        return np.array(re), np.array(f)

    def _draw_reference(self) -> None:
        ticks = [float(tick) for tick in CHART_EPS_TICKS]
        for label, eps in zip(CHART_EPS_TICKS, ticks):
            self._draw_roughness(eps, label, self.palette.next())
        if self.eps != 0 and self.eps not in ticks:
            self._draw_roughness(self.eps, f"{self.eps:g}", self.palette.highlight)

        re, f = self.turbulent_curve(0.0)
        self.ax.plot(re, f, color=self.palette.laminar, linewidth=1, label="smooth pipe")

        re, f = self.laminar_line()
        self.ax.plot(re, f, color=self.palette.laminar, linewidth=1, label="laminar flow")

        re, f = self.rough_boundary()
        self.ax.plot(
            re,
            f,
            color=self.palette.rough_boundary,
            linewidth=1,
            linestyle="--",
            label="hydraulically rough boundary",
        )

        format_plot(
            self.ax,
            title="Moody Diagram",
            xlabel="Reynolds Number",
            ylabel="Darcy Friction Factor",
            xlim=CHART_RE_LIMITS,
            ylim=CHART_F_LIMITS,
            yticks=CHART_F_TICKS,
        )

    def _draw_roughness(self, eps: float, label: str, color: str) -> None:
        re, f = self.turbulent_curve(eps)
        self.ax.plot(re, f, color=color, linewidth=0.8)
        self.ax.annotate(
            label,
            xy=(1.1 * re[-1], f[-1]),
            fontsize=7,
            va="center",
            ha="left",
            annotation_clip=False,
        )

    def add_solutions(self, solutions: Iterable[FlowSolution]) -> None:
        solutions = list(solutions)
        self.ax.scatter(
            [s.reynolds for s in solutions],
            [s.f for s in solutions],
            color=self.palette.accent,
            zorder=3,
        )

    def add_coupling_line(
        self, coupling: Coupling, solutions: Iterable[FlowSolution]
    ) -> None:
        """Dashed segment of the coupling relation a decade either side of each solution."""
        for solution in solutions:
            re = np.array([solution.reynolds / 10, solution.reynolds * 10])
            f = [coupling.friction(re_i) for re_i in re]
            self.ax.plot(re, f, color=self.palette.accent, linestyle="--", linewidth=1)

    def add_friction_line(self, f: float) -> None:
        self.ax.axhline(f, color=self.palette.accent, linestyle="--", linewidth=1)

    def save(self, name: str = "moody_diagram", folder: Path = FIGS_PATH) -> Path:
        return save_plot(self.fig, folder=folder, name=name)

    def close(self) -> None:
        plt.close(self.fig)
