import logging
from typing import Optional

import numpy as np
import pandas as pd

from errors import FrictionFactorError
from friction_factor import SolverOptions
from head_loss import solve_head_diameter, solve_head_flow_rate, solve_head_velocity
from utilities.data.import_data import normalize_cases

logger = logging.getLogger(__name__)

SOLVERS = {
    "velocity": solve_head_velocity,
    "flow_rate": solve_head_flow_rate,
    "diameter": solve_head_diameter,
}
RESULT_COLUMNS = ["case", "kind", "reynolds", "f", "regime", "eps", "error"]


def solve_cases(
    cases: pd.DataFrame, options: Optional[SolverOptions] = None
) -> pd.DataFrame:
    """
    Solve every case of a case table.

    Returns one row per solution; a case with two admissible regimes gives
    two rows, turbulent first. A case the solver rejects gives a single row
    with the message in `error` and NaN results.
    """
    cases = normalize_cases(cases)
    rows = []
    for case, row in cases.iterrows():
        thk = None if pd.isna(row["thk"]) else float(row["thk"])
        try:
            solutions = SOLVERS[row["kind"]](
                row["h"],
                row["x"],
                row["L"],
                eps=row["eps"],
                thk=thk,
                rho=row["rho"],
                mu=row["mu"],
                g=row["g"],
                options=options,
            )
        except (FrictionFactorError, ValueError) as exc:
            logger.warning("case %s failed: %s", case, exc)
            rows.append(
                {
                    "case": case,
                    "kind": row["kind"],
                    "reynolds": np.nan,
                    "f": np.nan,
                    "regime": None,
                    "eps": np.nan,
                    "error": str(exc),
                }
            )
            continue

        for solution in solutions:
            rows.append(
                {
                    "case": case,
                    "kind": row["kind"],
                    "reynolds": solution.reynolds,
                    "f": solution.f,
                    "regime": solution.regime.value,
                    "eps": solution.eps,
                    "error": None,
                }
            )
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)
