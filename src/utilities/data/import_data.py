"""
Case Table Import Utilities

Reads tables of head-loss cases from CSV or Excel files into a pandas
DataFrame ready for `batch.solve_cases`.

Each row describes one case:
    - kind: "velocity", "flow_rate" or "diameter"
    - h: head loss
    - x: mean velocity, flow rate or diameter, depending on `kind`
    - L: pipe length
    - eps, thk, rho, mu, g: optional; blanks take the cgs water defaults
"""

from pathlib import Path
from typing import Optional, Union

import numpy as np
import pandas as pd

from utilities.units.consts import G, MU_WATER_25C, RHO_WATER_25C

CASE_KINDS = ("velocity", "flow_rate", "diameter")
REQUIRED_COLUMNS = ["kind", "h", "x", "L"]
OPTIONAL_DEFAULTS = {
    "eps": 0.0,
    "thk": np.nan,
    "rho": RHO_WATER_25C,
    "mu": MU_WATER_25C,
    "g": G,
}


def import_cases(
    file_path: Union[str, Path], sheet_name: Optional[Union[str, int]] = None
) -> pd.DataFrame:
    """
    Read a case table from a CSV or Excel file.

    Args:
        file_path (str | Path): Path to a .csv, .xlsx or .xls file.
        sheet_name (str | int, optional): Excel sheet to read. Defaults to the first sheet.

    Returns:
        pd.DataFrame: Normalized case table (see `normalize_cases`).

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If required columns are missing or a kind is unknown.
    """
    path = Path(file_path)
    if path.suffix.lower() in (".xlsx", ".xls"):
        df = pd.read_excel(io=path, sheet_name=0 if sheet_name is None else sheet_name)
    else:
        df = pd.read_csv(path)
    return normalize_cases(df)


def normalize_cases(cases: pd.DataFrame) -> pd.DataFrame:
    """Check required columns, fill optional ones and lower-case the kinds."""
    missing = [column for column in REQUIRED_COLUMNS if column not in cases.columns]
    if missing:
        raise ValueError(f"case table is missing columns: {', '.join(missing)}")

    cases = cases.copy()
    for column, default in OPTIONAL_DEFAULTS.items():
        if column not in cases.columns:
            cases[column] = default
        elif not pd.isna(default):
            cases[column] = cases[column].fillna(default)

    cases["kind"] = cases["kind"].astype(str).str.strip().str.lower()
    unknown = sorted(set(cases["kind"]) - set(CASE_KINDS))
    if unknown:
        raise ValueError(f"unknown case kinds: {', '.join(unknown)}")
    return cases
