"""
Utilities for printing solver results with significant figures.

`print_solutions` prints each (Re, f) solution of a case on its own line,
tagged with the flow regime, using `format_sigfigs` for the numbers.
"""

import math
from typing import Iterable

from regime import FlowSolution


def format_sigfigs(num: float, sigfigs: int = 4, scientific: bool = False) -> str:
    """Format a numeric value to the requested number of significant figures."""
    if num == 0:
        return "0"
    if scientific:
        return f"{num:.{sigfigs - 1}e}"
    magnitude = int(math.floor(math.log10(abs(num))))
    decimals = sigfigs - magnitude - 1
    if decimals >= 0:
        return f"{num:.{decimals}f}"
    return f"{num:.{sigfigs}g}"


def format_solution(solution: FlowSolution, sigfigs: int = 4) -> str:
    re = format_sigfigs(solution.reynolds, sigfigs, scientific=solution.reynolds >= 1e5)
    f = format_sigfigs(solution.f, sigfigs)
    return f"Re = {re}, f = {f} ({solution.regime.value})"


def print_solutions(label: str, solutions: Iterable[FlowSolution], sigfigs: int = 4) -> None:
    """
    Print every solution of one case.

    Args:
        label (str): Case identifier printed as a header.
        solutions (Iterable[FlowSolution]): Solutions returned by the solver.
        sigfigs (int, optional): Significant figures for Re and f. Defaults to 4.
    """
    print(f"{label}:")
    for solution in solutions:
        print(f"    {format_solution(solution, sigfigs)}")
