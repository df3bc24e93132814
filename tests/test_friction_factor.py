"""
Tests for the friction-factor solver: coupled solves, inverse problems,
regime selection and solver options.

Golden values use h = 40 cm, v = 100 cm/s, L = 2500 cm, rho = 0.989 g/cc,
mu = 0.0089 P, g = 981 cm/s^2 and eps = 0.0025.
"""

import warnings

import pytest

from colebrook import residual
from coupling import DiameterCoupling, FixedReynolds, FlowRateCoupling, VelocityCoupling
from errors import (
    ConvergenceError,
    DomainError,
    NoSolutionError,
    RoughnessClampedWarning,
    TransitionalFlowWarning,
)
from friction_factor import FrictionFactorSolver, SolverOptions
from regime import Regime

M_GOLDEN = 2.8249625885e-07
EPS_GOLDEN = 2.5e-3


@pytest.fixture
def solver() -> FrictionFactorSolver:
    return FrictionFactorSolver()


def test_velocity_golden(solver) -> None:
    """Laminar candidate Re ~ 15052 is rejected, leaving the turbulent root."""
    solutions = solver.solve_from_coupling(VelocityCoupling(M_GOLDEN), EPS_GOLDEN)
    assert len(solutions) == 1
    solution = solutions[0]
    assert solution.regime == Regime.TURBULENT
    assert solution.reynolds == pytest.approx(93568.868, rel=1e-3)
    assert solution.f == pytest.approx(0.02643286, rel=1e-3)
    assert solution.eps == EPS_GOLDEN
    assert abs(residual(solution.f, solution.reynolds, solution.eps)) < 1e-4


def test_turbulent_solution_lies_on_coupling(solver) -> None:
    coupling = VelocityCoupling(M_GOLDEN)
    solution = solver.solve_from_coupling(coupling, EPS_GOLDEN)[0]
    assert solution.f == pytest.approx(coupling.friction(solution.reynolds), rel=1e-12)


def test_velocity_dual_zone(solver) -> None:
    coupling = VelocityCoupling(1.5e-5)
    turbulent, laminar = solver.solve_from_coupling(coupling, 0.0)
    assert turbulent.regime == Regime.TURBULENT
    assert turbulent.reynolds >= 2300
    assert laminar.regime == Regime.LAMINAR
    assert laminar.reynolds == pytest.approx(2065.59, rel=1e-4)
    assert 64 / laminar.reynolds == pytest.approx(coupling.friction(laminar.reynolds), rel=1e-12)


def test_diameter_no_solution(solver) -> None:
    """Laminar Re = 3000 and turbulent Re ~ 1965: neither is admissible."""
    with pytest.warns(TransitionalFlowWarning):
        with pytest.raises(NoSolutionError):
            solver.solve_from_coupling(DiameterCoupling(192000.0), 0.0)


def test_laminar_on_turbulent_bound_is_rejected(solver) -> None:
    # K / 64 = 2300 exactly
    with pytest.warns(TransitionalFlowWarning):
        with pytest.raises(NoSolutionError):
            solver.solve_from_coupling(DiameterCoupling(147200.0), 0.0)

    solutions = solver.solve_from_coupling(DiameterCoupling(147199.0), 0.0)
    assert [s.regime for s in solutions] == [Regime.LAMINAR]
    assert solutions[0].reynolds == pytest.approx(2299.984375)


def test_fixed_reynolds_on_bound_is_turbulent(solver) -> None:
    with pytest.warns(TransitionalFlowWarning):
        solutions = solver.solve_from_coupling(FixedReynolds(2300.0), 0.0)
    assert [s.regime for s in solutions] == [Regime.TURBULENT]
    assert solutions[0].f == pytest.approx(0.047283, rel=1e-4)


def test_re_to_f(solver) -> None:
    turbulent = solver.re_to_f(1e5, 1e-3)
    assert turbulent.regime == Regime.TURBULENT
    assert turbulent.f == pytest.approx(0.02217454, rel=1e-4)

    assert solver.re_to_f(2300.0).regime == Regime.TURBULENT
    assert solver.re_to_f(2300.0).f == pytest.approx(0.047283, rel=1e-4)

    laminar = solver.re_to_f(2299.999)
    assert laminar.regime == Regime.LAMINAR
    assert laminar.f == 64 / 2299.999


def test_re_to_f_rejects_non_positive_reynolds(solver) -> None:
    with pytest.raises(DomainError):
        solver.re_to_f(0.0)


@pytest.mark.parametrize(
    "build",
    [
        lambda f0, re0: VelocityCoupling(f0 / re0),
        lambda f0, re0: DiameterCoupling(f0 * re0**2),
        lambda f0, re0: FlowRateCoupling(f0 * re0**5),
    ],
    ids=["velocity", "diameter", "flow_rate"],
)
def test_coupling_round_trip(solver, build) -> None:
    """A coupling built through a known turbulent point solves back to it."""
    re0, eps = 1e6, 1e-5
    f0 = solver.re_to_f(re0, eps).f
    solutions = solver.solve_from_coupling(build(f0, re0), eps)
    assert len(solutions) == 1
    assert solutions[0].reynolds == pytest.approx(re0, rel=1e-3)
    assert solutions[0].f == pytest.approx(f0, rel=1e-3)


def test_f_to_re_dual(solver) -> None:
    turbulent, laminar = solver.f_to_re(0.028, 1e-3)
    assert turbulent.regime == Regime.TURBULENT
    assert turbulent.reynolds == pytest.approx(19800.13, rel=1e-5)
    assert laminar.regime == Regime.LAMINAR
    assert laminar.reynolds == pytest.approx(2285.7143, rel=1e-6)


def test_f_to_re_below_fully_rough_limit(solver) -> None:
    # fully rough f for eps = 0.01 is ~0.038; laminar Re = 5333 is inadmissible
    with pytest.raises(NoSolutionError):
        solver.f_to_re(0.012, 0.01)


def test_f_to_re_without_bracket(solver) -> None:
    with pytest.raises(NoSolutionError):
        solver.f_to_re(0.005, 0.0)


def test_f_to_re_rejects_non_positive_f(solver) -> None:
    with pytest.raises(DomainError):
        solver.f_to_re(0.0)


def test_disabled_turbulent_check_returns_laminar(solver) -> None:
    """With one check disabled the remaining candidate is returned unfiltered."""
    options = SolverOptions(check_turbulent=False)
    solutions = solver.solve_from_coupling(VelocityCoupling(M_GOLDEN), EPS_GOLDEN, options)
    assert [s.regime for s in solutions] == [Regime.LAMINAR]
    assert solutions[0].reynolds == pytest.approx(15051.6, rel=1e-5)


def test_disabled_laminar_check_returns_turbulent(solver) -> None:
    options = SolverOptions(check_laminar=False)
    solutions = solver.solve_from_coupling(DiameterCoupling(192000.0), 0.0, options)
    assert [s.regime for s in solutions] == [Regime.TURBULENT]
    assert solutions[0].reynolds == pytest.approx(1964.77, rel=1e-3)


def test_disabled_laminar_check_without_turbulent_root(solver) -> None:
    with pytest.raises(NoSolutionError):
        solver.f_to_re(0.005, 0.0, SolverOptions(check_laminar=False))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"check_laminar": False, "check_turbulent": False},
        {"strategy": "secant"},
        {"tol": 0.0},
        {"max_iter": 0},
        {"f0": -0.01},
    ],
)
def test_invalid_options(kwargs) -> None:
    with pytest.raises(ValueError):
        SolverOptions(**kwargs)


def test_with_options_keeps_other_settings() -> None:
    solver = FrictionFactorSolver(SolverOptions(strategy="legacy", tol=1e-6))
    changed = solver.with_options(check_laminar=False)
    assert changed.options.strategy == "legacy"
    assert changed.options.tol == 1e-6
    assert not changed.options.check_laminar
    assert solver.options.check_laminar


def test_legacy_strategy_golden(solver) -> None:
    options = SolverOptions(strategy="legacy")
    solutions = solver.solve_from_coupling(VelocityCoupling(M_GOLDEN), EPS_GOLDEN, options)
    assert len(solutions) == 1
    assert solutions[0].reynolds == pytest.approx(93568.868, rel=1e-2)
    assert solutions[0].f == pytest.approx(0.02643286, rel=1e-2)


def test_legacy_strategy_dual_zone(solver) -> None:
    options = SolverOptions(strategy="legacy")
    solutions = solver.solve_from_coupling(VelocityCoupling(1.5e-5), 0.0, options)
    assert [s.regime for s in solutions] == [Regime.TURBULENT, Regime.LAMINAR]


def test_legacy_strategy_laminar_fallback(solver) -> None:
    """The search drops below Re = 2300, so only the laminar closed form remains."""
    options = SolverOptions(strategy="legacy")
    solutions = solver.solve_from_coupling(FlowRateCoupling(1e15), 0.0, options)
    assert [s.regime for s in solutions] == [Regime.LAMINAR]
    assert solutions[0].reynolds == pytest.approx((1e15 / 64) ** 0.25)


def test_roughness_clamped_with_warning(solver) -> None:
    with pytest.warns(RoughnessClampedWarning):
        solutions = solver.solve_from_coupling(VelocityCoupling(M_GOLDEN), 0.08)
    assert solutions[0].eps == 0.05


def test_roughness_clamped_quietly(solver) -> None:
    options = SolverOptions(notify_roughness_clamp=False)
    with warnings.catch_warnings():
        warnings.simplefilter("error", RoughnessClampedWarning)
        solutions = solver.solve_from_coupling(VelocityCoupling(M_GOLDEN), 0.08, options)
    assert solutions[0].eps == 0.05


def test_negative_roughness(solver) -> None:
    with pytest.raises(DomainError):
        solver.solve_from_coupling(VelocityCoupling(M_GOLDEN), -1e-3)


def test_newton_budget(solver) -> None:
    with pytest.raises(ConvergenceError):
        solver.solve_from_coupling(
            VelocityCoupling(M_GOLDEN), EPS_GOLDEN, SolverOptions(max_iter=1)
        )


def test_callable_roughness_clamped_against_solution(solver) -> None:
    """A clamp hit by the returned solution is reported once."""
    with pytest.warns(RoughnessClampedWarning) as record:
        solutions = solver.solve_from_coupling(VelocityCoupling(M_GOLDEN), lambda re: 0.2)
    clamped = [w for w in record if issubclass(w.category, RoughnessClampedWarning)]
    assert len(clamped) == 1
    assert solutions[0].eps == 0.05


def test_diameter_closed_form_turbulent(solver) -> None:
    (solution,) = solver.solve_from_coupling(DiameterCoupling(1e6), 1e-3)
    assert solution.regime == Regime.TURBULENT
    assert solution.f == pytest.approx(0.03826907, rel=1e-6)
    assert solution.reynolds == pytest.approx((1e6 / solution.f) ** 0.5)


def test_creeping_diameter_flow_is_laminar(solver) -> None:
    """No positive turbulent f exists, so only the laminar closed form is returned."""
    solutions = solver.solve_from_coupling(DiameterCoupling(1.0), 0.0)
    assert [s.regime for s in solutions] == [Regime.LAMINAR]
    assert solutions[0].reynolds == pytest.approx(1 / 64)


@pytest.mark.parametrize("strategy", ["newton", "legacy"])
def test_newton_overshoot_recovered_by_brentq(solver, strategy) -> None:
    """From f0 = 0.01 newton overshoots below zero; the bracketed solve still finds the root."""
    coupling = VelocityCoupling(7.16e-13)
    (solution,) = solver.solve_from_coupling(coupling, 0.0, SolverOptions(strategy=strategy))
    assert solution.regime == Regime.TURBULENT
    assert solution.f == pytest.approx(coupling.friction(solution.reynolds), rel=1e-2)
    if strategy == "newton":
        assert abs(residual(solution.f, solution.reynolds, 0.0)) < 1e-4


def test_re_to_f_at_very_high_reynolds(solver) -> None:
    solution = solver.re_to_f(1e12)
    assert solution.regime == Regime.TURBULENT
    assert abs(residual(solution.f, 1e12, 0.0)) < 1e-4


def test_transitional_advisory_can_be_silenced(solver) -> None:
    options = SolverOptions(notify_transitional=False)
    with warnings.catch_warnings():
        warnings.simplefilter("error", TransitionalFlowWarning)
        with pytest.raises(NoSolutionError):
            solver.solve_from_coupling(DiameterCoupling(192000.0), 0.0, options)

