"""
Coupling relations between Reynolds number and friction factor.

Head loss plus one more physical input (mean velocity, flow rate or
diameter) ties Re and f together through a single dimensionless constant.
Each coupling class knows how to map f to Re along its relation, the
relation's friction factor at a given Re, and where the relation meets the
laminar law f = 64/Re in closed form. The solver only ever sees this
interface, whichever physical inputs built the constant.

Builders take inputs in any consistent unit system (cgs in the examples).
"""

import math
from dataclasses import dataclass
from typing import ClassVar, Optional

from dimensionless_numbers import diameter_from_flow_rate, diameter_from_velocity


def _check_positive(**values: float) -> None:
    for name, value in values.items():
        if not (value > 0 and math.isfinite(value)):
            raise ValueError(f"{name} must be a positive finite number, got {value}")


@dataclass(frozen=True)
class Coupling:
    value: float

    symbol: ClassVar[str] = "C"
    # whether the coupling relation f(Re) grows with Re
    increasing: ClassVar[bool] = True
    # whether Colebrook along the relation has a closed form in f
    explicit: ClassVar[bool] = False

    def __post_init__(self) -> None:
        _check_positive(**{self.symbol: self.value})

    def reynolds(self, f: float) -> float:
        raise NotImplementedError

    def friction(self, re: float) -> float:
        raise NotImplementedError

    def laminar_reynolds(self) -> float:
        raise NotImplementedError

    def turbulent_friction(self, eps: float) -> Optional[float]:
        raise NotImplementedError

    def diameter(self, re: float) -> float:
        raise ValueError(
            f"{type(self).__name__} was not built from physical inputs; "
            "cannot recover the pipe diameter"
        )


@dataclass(frozen=True)
class VelocityCoupling(Coupling):
    """f = M * Re, from head loss and mean velocity."""

    velocity: Optional[float] = None
    nu: Optional[float] = None

    symbol: ClassVar[str] = "M"
    increasing: ClassVar[bool] = True

    @classmethod
    def from_head_loss(
        cls, h: float, v: float, L: float, rho: float, mu: float, g: float
    ) -> "VelocityCoupling":
        _check_positive(h=h, v=v, L=L, rho=rho, mu=mu, g=g)
        M = 2 * g * mu * h / v**3 / rho / L
        return cls(M, velocity=v, nu=mu / rho)

    def reynolds(self, f: float) -> float:
        return f / self.value

    def friction(self, re: float) -> float:
        return self.value * re

    def laminar_reynolds(self) -> float:
        return math.sqrt(64 / self.value)

    def diameter(self, re: float) -> float:
        if self.velocity is None or self.nu is None:
            return super().diameter(re)
        return diameter_from_velocity(re, self.velocity, self.nu)


@dataclass(frozen=True)
class DiameterCoupling(Coupling):
    """f = K / Re^2, from head loss and hydraulic diameter."""

    D: Optional[float] = None

    symbol: ClassVar[str] = "K"
    increasing: ClassVar[bool] = False
    explicit: ClassVar[bool] = True

    @classmethod
    def from_head_loss(
        cls, h: float, D: float, L: float, rho: float, mu: float, g: float
    ) -> "DiameterCoupling":
        _check_positive(h=h, D=D, L=L, rho=rho, mu=mu, g=g)
        K = 2 * g * h * rho**2 * D**3 / mu**2 / L
        return cls(K, D=D)

    def reynolds(self, f: float) -> float:
        return math.sqrt(self.value / f)

    def friction(self, re: float) -> float:
        return self.value / re**2

    def laminar_reynolds(self) -> float:
        return self.value / 64

    def turbulent_friction(self, eps: float) -> Optional[float]:
        """
        Colebrook solved in closed form, since Re * sqrt(f) = sqrt(K).

        Returns None when the log argument reaches 1, where no positive f exists.
        """
        arg = eps / 3.7 + 2.51 / math.sqrt(self.value)
        if arg >= 1:
            return None
        return (-2 * math.log10(arg)) ** -2

    def diameter(self, re: float) -> float:
        if self.D is None:
            return super().diameter(re)
        return self.D


@dataclass(frozen=True)
class FlowRateCoupling(Coupling):
    """f = P / Re^5, from head loss and volumetric flow rate."""

    flow_rate: Optional[float] = None
    nu: Optional[float] = None

    symbol: ClassVar[str] = "P"
    increasing: ClassVar[bool] = False

    @classmethod
    def from_head_loss(
        cls, h: float, Q: float, L: float, rho: float, mu: float, g: float
    ) -> "FlowRateCoupling":
        _check_positive(h=h, Q=Q, L=L, rho=rho, mu=mu, g=g)
        P = 2 * g * h * Q**3 / (math.pi / 4) ** 3 / (mu / rho) ** 5 / L
        return cls(P, flow_rate=Q, nu=mu / rho)

    def reynolds(self, f: float) -> float:
        return (self.value / f) ** (1 / 5)

    def friction(self, re: float) -> float:
        return self.value / re**5

    def laminar_reynolds(self) -> float:
        return (self.value / 64) ** (1 / 4)

    def diameter(self, re: float) -> float:
        if self.flow_rate is None or self.nu is None:
            return super().diameter(re)
        return diameter_from_flow_rate(re, self.flow_rate, self.nu)


@dataclass(frozen=True)
class FixedReynolds(Coupling):
    """Re known outright; f follows from the regime law alone."""

    symbol: ClassVar[str] = "Re"

    def reynolds(self, f: float) -> float:
        return self.value

    def friction(self, re: float) -> float:
        raise ValueError("a fixed Reynolds number has no coupling relation f(Re)")

    def laminar_reynolds(self) -> float:
        return self.value
