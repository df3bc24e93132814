"""
Root finders for the coupled Colebrook / coupling-relation equations.

Newton-Raphson on f, its bracketed Brent fallback and bisection on Re all go
through scipy.optimize.root_scalar. The damped multiplicative search on Re is kept
for parity with the historical head-loss/velocity and head-loss/flow-rate
solvers.
"""

import logging
from typing import Callable, Optional

from scipy.optimize import root_scalar

from consts import (
    BISECT_MAX_ITER,
    BISECT_TOL,
    BRENTQ_TOL,
    F_BRACKET,
    F_GUESS,
    LEGACY_MAX_ITER,
    LEGACY_RE_START,
    LEGACY_REL_TOL,
    LEGACY_STEP,
    NEWTON_MAX_ITER,
    NEWTON_TOL,
    RE_BRACKET,
    RE_TURB_MIN,
)
from errors import ConvergenceError, DomainError

logger = logging.getLogger(__name__)


def central_difference(func: Callable[[float], float]) -> Callable[[float], float]:
    def derivative(x: float) -> float:
        dx = 1e-6 * abs(x)
        return (func(x + dx) - func(x - dx)) / (2 * dx)

    return derivative


def newton(
    func: Callable[[float], float],
    f0: float = F_GUESS,
    tol: float = NEWTON_TOL,
    max_iter: int = NEWTON_MAX_ITER,
) -> float:
    """
    Newton-Raphson on the friction factor.

    Args:
        func (Callable): Residual as a function of f alone.
        f0 (float, optional): Starting friction factor. Defaults to 1e-2.
        tol (float, optional): Stop once |f_{n+1} - f_n| < tol. Defaults to 1e-4.
        max_iter (int, optional): Iteration budget. Defaults to 50.

    Returns:
        float: The friction factor root.

    Raises:
        ConvergenceError: If the budget runs out or an iterate leaves f > 0.
    """
    try:
        sol = root_scalar(
            func,
            x0=f0,
            fprime=central_difference(func),
            method="newton",
            xtol=tol,
            maxiter=max_iter,
        )
    except DomainError as exc:
        raise ConvergenceError(f"newton left the friction factor domain: {exc}") from exc

    if not sol.converged:
        raise ConvergenceError(f"newton on f did not converge. {sol.flag}")
    if sol.root <= 0:
        raise ConvergenceError(f"newton on f converged to non-positive f={sol.root}")
    logger.debug("newton on f: f=%.6g after %d iterations", sol.root, sol.iterations)
    return sol.root


def brackets_root(func: Callable[[float], float], lo: float, hi: float) -> bool:
    return func(lo) * func(hi) < 0


def bisect(
    func: Callable[[float], float],
    lo: float = RE_BRACKET[0],
    hi: float = RE_BRACKET[1],
    tol: float = BISECT_TOL,
    max_iter: int = BISECT_MAX_ITER,
) -> float:
    """Bisection on the Reynolds number inside [lo, hi]."""
    if not brackets_root(func, lo, hi):
        raise ConvergenceError(f"residual does not change sign on [{lo:g}, {hi:g}]")

    sol = root_scalar(func, bracket=[lo, hi], method="bisect", xtol=tol, maxiter=max_iter)
    if not sol.converged:
        raise ConvergenceError(f"bisection on Re did not converge. {sol.flag}")
    logger.debug("bisection on Re: Re=%.6g after %d iterations", sol.root, sol.iterations)
    return sol.root


def brentq(
    func: Callable[[float], float],
    lo: float = F_BRACKET[0],
    hi: float = F_BRACKET[1],
    tol: float = BRENTQ_TOL,
    max_iter: int = NEWTON_MAX_ITER,
) -> float:
    """Bracketed Brent solve on the friction factor, for when newton overshoots."""
    if not brackets_root(func, lo, hi):
        raise ConvergenceError(f"residual does not change sign on [{lo:g}, {hi:g}]")

    sol = root_scalar(func, bracket=[lo, hi], method="brentq", xtol=tol, maxiter=max_iter)
    if not sol.converged:
        raise ConvergenceError(f"brentq on f did not converge. {sol.flag}")
    logger.debug("brentq on f: f=%.6g after %d iterations", sol.root, sol.iterations)
    return sol.root


def damped_search(
    friction_at: Callable[[float], float],
    target_at: Callable[[float], float],
    increasing: bool,
    re0: float = LEGACY_RE_START,
    step: float = LEGACY_STEP,
    rel_tol: float = LEGACY_REL_TOL,
    re_floor: float = RE_TURB_MIN,
    max_iter: int = LEGACY_MAX_ITER,
    halve_on_reverse: bool = True,
) -> Optional[float]:
    """
    Legacy damped multiplicative search on Re.

    Steps Re by a multiplicative fraction towards the crossing of the turbulent
    friction curve `friction_at` and the coupling relation `target_at` until
    their relative mismatch drops below `rel_tol`. `increasing` tells whether
    the coupling relation grows with Re, which fixes the step direction.

    With `halve_on_reverse` the step is halved every time the direction
    reverses, so the search settles on the crossing. Without it the step stays
    fixed as in the historical solvers, which can oscillate around a crossing
    narrower than one step and then exhaust `max_iter`.

    Returns:
        float | None: Re at the crossing, or None when the search went below
        `re_floor`, meaning the caller falls back to the laminar closed form.
    """
    re = re0
    upward = None
    for _ in range(max_iter):
        f = friction_at(re)
        target = target_at(re)
        if abs(f - target) / f < rel_tol:
            logger.debug("damped search: Re=%.6g f=%.6g", re, f)
            return re
        direction = (f > target) == increasing
        if halve_on_reverse and upward is not None and direction != upward:
            step /= 2
        upward = direction
        if upward:
            re *= 1 + step
        else:
            re *= 1 - step
            if re < re_floor:
                logger.debug("damped search dropped below Re=%g, laminar fallback", re_floor)
                return None
    raise ConvergenceError(f"damped search did not converge in {max_iter} steps")
