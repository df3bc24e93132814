import logging
import warnings
from typing import Callable, Union

from consts import EPS_MAX
from errors import DomainError, RoughnessClampedWarning

logger = logging.getLogger(__name__)

# relative roughness, or a function of Re when it comes from an absolute
# roughness length over a diameter that depends on Re
Roughness = Union[float, Callable[[float], float]]


def clamp_roughness(eps: float) -> tuple[float, bool]:
    if eps > EPS_MAX:
        return EPS_MAX, True
    return eps, False


class RoughnessPolicy:
    def __init__(self, notify: bool = True):
        self.notify = notify

    def clamp(self, eps: float) -> tuple[float, bool]:
        if eps < 0:
            raise DomainError(f"relative roughness must be >= 0, got {eps}")
        return clamp_roughness(eps)

    def apply(self, eps: float) -> float:
        clamped, reassigned = self.clamp(eps)
        if reassigned:
            self.report(eps)
        return clamped

    def report(self, eps: float) -> None:
        logger.info("relative roughness %g reassigned to %g", eps, EPS_MAX)
        if self.notify:
            warnings.warn(
                f"relative roughness {eps:g} exceeds {EPS_MAX:g}; using {EPS_MAX:g}",
                RoughnessClampedWarning,
                stacklevel=3,
            )

    def resolve(self, roughness: Roughness) -> Callable[[float], float]:
        """
        Turn a roughness value or callable into a function of Re returning a clamped relative roughness.

        A constant is checked and clamped once, with notification. A callable is
        clamped silently on each evaluation; the caller reports a clamp against
        the final solution instead.
        """
        if callable(roughness):

            def eps_at(re: float) -> float:
                return self.clamp(roughness(re))[0]

            return eps_at

        eps = self.apply(roughness)
        return lambda re: eps
