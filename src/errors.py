"""
Failure and advisory types raised by the friction-factor solver.

Errors are all ArithmeticError subclasses so callers can catch the whole
family at once. Advisories are warnings: they never stop a solve.
"""


class FrictionFactorError(ArithmeticError):
    """Base class for every solver failure."""


class DomainError(FrictionFactorError, ValueError):
    """Colebrook residual evaluated outside its domain (f <= 0, Re <= 0, log argument <= 0)."""


class ConvergenceError(FrictionFactorError):
    """An iterative root finder ran out of iterations or left the positive domain."""


class NoSolutionError(FrictionFactorError):
    """Neither the laminar nor the turbulent candidate is admissible."""


class RoughnessClampedWarning(UserWarning):
    """Relative roughness above the valid domain was reassigned to the maximum."""


class TransitionalFlowWarning(UserWarning):
    """Laminar candidate fell between the turbulent lower bound and the laminar soft bound."""
