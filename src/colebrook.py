from functools import cache
from typing import Callable

import numpy as np

from errors import DomainError


def residual(f: float, re: float, eps: float) -> float:
    """Colebrook-White residual, zero on the turbulent friction curve."""
    if f <= 0:
        raise DomainError(f"friction factor must be > 0, got {f}")
    if re <= 0:
        raise DomainError(f"Reynolds number must be > 0, got {re}")
    arg = eps / 3.7 + 2.51 / (re * np.sqrt(f))
    if arg <= 0:
        raise DomainError(f"Colebrook log argument must be > 0, got {arg}")
    return float(1 / np.sqrt(f) + 2 * np.log10(arg))


@cache
def minimum_turbulent_friction(eps: float) -> float:
    # fully rough limit of Colebrook, Re -> inf
    if eps <= 0:
        return 0.0
    return float((2 * np.log10(3.7 / eps)) ** -2)


def residual_in_f(
    reynolds_of: Callable[[float], float], eps_at: Callable[[float], float]
) -> Callable[[float], float]:
    # Re tied to f through the coupling relation
    def func(f: float) -> float:
        if f <= 0:
            raise DomainError(f"friction factor must be > 0, got {f}")
        re = reynolds_of(f)
        return residual(f, re, eps_at(re))

    return func


def residual_in_re(f: float, eps: float) -> Callable[[float], float]:
    def func(re: float) -> float:
        return residual(f, re, eps)

    return func
