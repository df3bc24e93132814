"""
Head-loss entry points.

Each function reduces head loss plus one more physical input to a coupling
constant and hands it to the solver. Defaults describe water at 25 °C in
cgs units; if taken, every other input must be in cgs as well.

Roughness is given either as relative roughness `eps` or as an absolute
roughness length `thk`. With `thk` and a velocity or flow rate, the
diameter depends on Re, so eps = thk / D(Re) is re-derived at every
candidate Re during the solve.
"""

from typing import Optional

from coupling import Coupling, DiameterCoupling, FlowRateCoupling, VelocityCoupling
from dimensionless_numbers import relative_roughness
from friction_factor import FrictionFactorSolver, SolverOptions
from regime import FlowSolution
from utilities.units.consts import G, MU_WATER_25C, RHO_WATER_25C


def solve_head_velocity(
    h: float,
    v: float,
    L: float,
    eps: float = 0.0,
    thk: Optional[float] = None,
    rho: float = RHO_WATER_25C,
    mu: float = MU_WATER_25C,
    g: float = G,
    options: Optional[SolverOptions] = None,
) -> tuple[FlowSolution, ...]:
    """(Re, f) from head loss h and mean velocity v over a pipe of length L."""
    coupling = VelocityCoupling.from_head_loss(h=h, v=v, L=L, rho=rho, mu=mu, g=g)
    return _solve(coupling, eps, thk, options)


def solve_head_flow_rate(
    h: float,
    Q: float,
    L: float,
    eps: float = 0.0,
    thk: Optional[float] = None,
    rho: float = RHO_WATER_25C,
    mu: float = MU_WATER_25C,
    g: float = G,
    options: Optional[SolverOptions] = None,
) -> tuple[FlowSolution, ...]:
    """(Re, f) from head loss h and volumetric flow rate Q over a pipe of length L."""
    coupling = FlowRateCoupling.from_head_loss(h=h, Q=Q, L=L, rho=rho, mu=mu, g=g)
    return _solve(coupling, eps, thk, options)


def solve_head_diameter(
    h: float,
    D: float,
    L: float = 100.0,
    eps: float = 0.0,
    thk: Optional[float] = None,
    rho: float = RHO_WATER_25C,
    mu: float = MU_WATER_25C,
    g: float = G,
    options: Optional[SolverOptions] = None,
) -> tuple[FlowSolution, ...]:
    """(Re, f) from head loss h and hydraulic diameter D over a pipe of length L."""
    coupling = DiameterCoupling.from_head_loss(h=h, D=D, L=L, rho=rho, mu=mu, g=g)
    return _solve(coupling, eps, thk, options)


def _solve(
    coupling: Coupling,
    eps: float,
    thk: Optional[float],
    options: Optional[SolverOptions],
) -> tuple[FlowSolution, ...]:
    solver = FrictionFactorSolver(options)
    if thk is None:
        return solver.solve_from_coupling(coupling, eps)
    if thk < 0:
        raise ValueError(f"roughness length must be >= 0, got {thk}")

    def eps_at(re: float) -> float:
        return relative_roughness(thk, coupling.diameter(re))

    return solver.solve_from_coupling(coupling, eps_at)
