import logging
from dataclasses import dataclass, replace
from typing import Literal, Optional

from colebrook import minimum_turbulent_friction, residual_in_f, residual_in_re
from consts import F_BRACKET, F_GUESS, NEWTON_MAX_ITER, NEWTON_TOL, RE_BRACKET
from coupling import Coupling, FixedReynolds
from errors import ConvergenceError, DomainError, NoSolutionError
from regime import FlowSolution, Regime, RegimeClassifier, laminar_admissible
from root_finder import bisect, brackets_root, brentq, damped_search, newton
from roughness import Roughness, RoughnessPolicy, clamp_roughness

logger = logging.getLogger(__name__)

Strategy = Literal["newton", "legacy"]


@dataclass(frozen=True)
class SolverOptions:
    check_laminar: bool = True
    check_turbulent: bool = True
    notify_roughness_clamp: bool = True
    notify_transitional: bool = True
    strategy: Strategy = "newton"  # "legacy" selects the damped multiplicative search
    halve_on_reverse: bool = True  # legacy only; False keeps the historical fixed step
    tol: float = NEWTON_TOL
    max_iter: int = NEWTON_MAX_ITER
    f0: float = F_GUESS

    def __post_init__(self) -> None:
        if self.strategy not in ("newton", "legacy"):
            raise ValueError(f"unknown strategy: {self.strategy}")
        if not (self.check_laminar or self.check_turbulent):
            raise ValueError("at least one of check_laminar / check_turbulent must be set")
        if self.tol <= 0 or self.max_iter <= 0 or self.f0 <= 0:
            raise ValueError("tol, max_iter and f0 must be > 0")


class FrictionFactorSolver:
    """
    Finds the (Re, f) pairs consistent with both a coupling relation and the regime law.

    Forward direction: `solve_from_coupling` for head-loss based problems.
    Inverse direction: `re_to_f` and `f_to_re`.

    The solver holds no state besides its default options, so one instance
    can be shared between threads.
    """

    def __init__(self, options: Optional[SolverOptions] = None):
        self.options = options or SolverOptions()

    def with_options(self, **changes) -> "FrictionFactorSolver":
        return FrictionFactorSolver(replace(self.options, **changes))

    def solve_from_coupling(
        self,
        coupling: Coupling,
        eps: Roughness = 0.0,
        options: Optional[SolverOptions] = None,
    ) -> tuple[FlowSolution, ...]:
        """
        Solve for (Re, f) given a coupling constant and a roughness.

        Args:
            coupling (Coupling): Coupling relation between Re and f.
            eps (float | Callable): Relative roughness, or a function of Re.
            options (SolverOptions, optional): Overrides the solver defaults.

        Returns:
            tuple[FlowSolution, ...]: One or two solutions, turbulent first.

        Raises:
            DomainError: Negative roughness or a residual outside its domain.
            ConvergenceError: The turbulent root finder failed.
            NoSolutionError: Neither regime is admissible.
        """
        options = options or self.options
        policy = RoughnessPolicy(notify=options.notify_roughness_clamp)
        eps_at = policy.resolve(eps)

        laminar = None
        turbulent = None
        if options.check_laminar:
            laminar = self._laminar_candidate(coupling, eps_at)
        if options.check_turbulent:
            turbulent = self._turbulent_candidate(coupling, eps_at, options)

        solutions = self._select(laminar, turbulent, options)
        if callable(eps):
            self._report_clamped(eps, solutions, policy)
        return solutions

    def re_to_f(
        self, re: float, eps: float = 0.0, options: Optional[SolverOptions] = None
    ) -> FlowSolution:
        """Friction factor at a known Reynolds number."""
        options = options or self.options
        if re <= 0:
            raise DomainError(f"Reynolds number must be > 0, got {re}")
        eps = RoughnessPolicy(notify=options.notify_roughness_clamp).apply(eps)

        if laminar_admissible(re):
            return FlowSolution(re, 64 / re, Regime.LAMINAR, eps)
        f = self._fixed_reynolds_friction(re, lambda _: eps, options)
        return FlowSolution(re, f, Regime.TURBULENT, eps)

    def f_to_re(
        self, f: float, eps: float = 0.0, options: Optional[SolverOptions] = None
    ) -> tuple[FlowSolution, ...]:
        """Reynolds number(s) at a known friction factor, turbulent first."""
        options = options or self.options
        if f <= 0:
            raise DomainError(f"friction factor must be > 0, got {f}")
        eps = RoughnessPolicy(notify=options.notify_roughness_clamp).apply(eps)

        laminar = None
        turbulent = None
        if options.check_laminar:
            laminar = FlowSolution(64 / f, f, Regime.LAMINAR, eps)
        if options.check_turbulent and f > minimum_turbulent_friction(eps):
            func = residual_in_re(f, eps)
            lo, hi = RE_BRACKET
            if brackets_root(func, lo, hi):
                turbulent = FlowSolution(bisect(func, lo, hi), f, Regime.TURBULENT, eps)
            else:
                logger.debug("no turbulent root for f=%g in Re [%g, %g]", f, lo, hi)
        return self._select(laminar, turbulent, options)

    def _laminar_candidate(self, coupling: Coupling, eps_at) -> FlowSolution:
        re = coupling.laminar_reynolds()
        return FlowSolution(re, 64 / re, Regime.LAMINAR, eps_at(re))

    def _turbulent_candidate(
        self, coupling: Coupling, eps_at, options: SolverOptions
    ) -> Optional[FlowSolution]:
        if coupling.explicit:
            return self._explicit_candidate(coupling, eps_at, options)
        if options.strategy == "legacy" and not isinstance(coupling, FixedReynolds):
            return self._legacy_candidate(coupling, eps_at, options)

        f = self._friction_root(residual_in_f(coupling.reynolds, eps_at), options)
        if f is None:
            return None
        re = coupling.reynolds(f)
        return FlowSolution(re, f, Regime.TURBULENT, eps_at(re))

    def _explicit_candidate(
        self, coupling: Coupling, eps_at, options: SolverOptions
    ) -> Optional[FlowSolution]:
        # eps may depend on Re, so the closed form is repeated until f settles
        f = options.f0
        for _ in range(options.max_iter):
            f_next = coupling.turbulent_friction(eps_at(coupling.reynolds(f)))
            if f_next is None:
                logger.debug("no turbulent root along %s=%g", coupling.symbol, coupling.value)
                return None
            settled = abs(f_next - f) < options.tol
            f = f_next
            if settled:
                re = coupling.reynolds(f)
                return FlowSolution(re, f, Regime.TURBULENT, eps_at(re))
        raise ConvergenceError(
            f"closed-form friction factor did not settle in {options.max_iter} iterations"
        )

    def _legacy_candidate(
        self, coupling: Coupling, eps_at, options: SolverOptions
    ) -> Optional[FlowSolution]:
        def friction_at(re: float) -> float:
            return self._fixed_reynolds_friction(re, eps_at, options)

        re = damped_search(
            friction_at,
            coupling.friction,
            coupling.increasing,
            halve_on_reverse=options.halve_on_reverse,
        )
        if re is None:
            return None
        return FlowSolution(re, friction_at(re), Regime.TURBULENT, eps_at(re))

    def _fixed_reynolds_friction(self, re: float, eps_at, options: SolverOptions) -> float:
        f = self._friction_root(residual_in_f(FixedReynolds(re).reynolds, eps_at), options)
        if f is None:
            lo, hi = F_BRACKET
            raise ConvergenceError(f"no turbulent friction factor in [{lo:g}, {hi:g}] at Re={re:g}")
        return f

    def _friction_root(self, func, options: SolverOptions) -> Optional[float]:
        """Newton on f, then brentq over F_BRACKET once newton fails. None when nothing is bracketed."""
        try:
            return newton(func, f0=options.f0, tol=options.tol, max_iter=options.max_iter)
        except ConvergenceError as exc:
            lo, hi = F_BRACKET
            if not brackets_root(func, lo, hi):
                logger.debug("no turbulent root for f in [%g, %g] (%s)", lo, hi, exc)
                return None
            logger.debug("newton on f failed, falling back to brentq: %s", exc)
            return brentq(func, lo, hi, max_iter=options.max_iter)

    def _select(
        self,
        laminar: Optional[FlowSolution],
        turbulent: Optional[FlowSolution],
        options: SolverOptions,
    ) -> tuple[FlowSolution, ...]:
        if options.check_laminar and options.check_turbulent:
            return RegimeClassifier(notify=options.notify_transitional).classify(
                laminar, turbulent
            )

        # a disabled check means the caller vouches for the remaining regime
        candidate = laminar if options.check_laminar else turbulent
        if candidate is None:
            regime = "laminar" if options.check_laminar else "turbulent"
            raise NoSolutionError(f"no {regime} solution found")
        return (candidate,)

    def _report_clamped(self, eps, solutions, policy: RoughnessPolicy) -> None:
        for solution in solutions:
            raw = eps(solution.reynolds)
            if clamp_roughness(raw)[1]:
                policy.report(raw)
