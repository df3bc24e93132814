import logging
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from consts import RE_LAM_MAX, RE_TURB_MIN
from errors import NoSolutionError, TransitionalFlowWarning

logger = logging.getLogger(__name__)


class Regime(str, Enum):
    LAMINAR = "laminar"
    TURBULENT = "turbulent"


@dataclass(frozen=True)
class FlowSolution:
    reynolds: float
    f: float
    regime: Regime
    eps: float = 0.0


def laminar_admissible(re: float) -> bool:
    return re < RE_TURB_MIN


def turbulent_admissible(re: float) -> bool:
    return re >= RE_TURB_MIN


class RegimeClassifier:
    """
    Decides which of the laminar and turbulent candidates are physically admissible.

    The two checks are independent. Laminar is admissible below RE_TURB_MIN,
    turbulent at or above it, so a candidate sitting exactly on the bound
    counts as turbulent. A rejected laminar candidate below RE_LAM_MAX is
    reported as transitional flow.
    """

    def __init__(self, notify: bool = True):
        self.notify = notify

    def laminar_ok(self, candidate: FlowSolution) -> bool:
        re = candidate.reynolds
        if laminar_admissible(re):
            return True
        if re < RE_LAM_MAX:
            logger.info("laminar candidate Re=%.6g rejected in the transitional window", re)
            if self.notify:
                warnings.warn(
                    f"laminar candidate Re={re:.4g} lies in the transitional window "
                    f"[{RE_TURB_MIN:g}, {RE_LAM_MAX:g}); treated as inadmissible",
                    TransitionalFlowWarning,
                    stacklevel=3,
                )
        else:
            logger.debug("laminar candidate Re=%.6g rejected", re)
        return False

    def turbulent_ok(self, candidate: FlowSolution) -> bool:
        if turbulent_admissible(candidate.reynolds):
            return True
        logger.debug("turbulent candidate Re=%.6g rejected", candidate.reynolds)
        return False

    def classify(
        self,
        laminar: Optional[FlowSolution],
        turbulent: Optional[FlowSolution],
    ) -> tuple[FlowSolution, ...]:
        """Admissible candidates, turbulent first. Missing candidates are passed as None."""
        solutions = []
        if turbulent is not None and self.turbulent_ok(turbulent):
            solutions.append(turbulent)
        if laminar is not None and self.laminar_ok(laminar):
            solutions.append(laminar)
        if not solutions:
            raise NoSolutionError(
                "no admissible regime: "
                f"laminar Re={_describe(laminar)}, turbulent Re={_describe(turbulent)}"
            )
        return tuple(solutions)


def _describe(candidate: Optional[FlowSolution]) -> str:
    return "n/a" if candidate is None else f"{candidate.reynolds:.6g}"
