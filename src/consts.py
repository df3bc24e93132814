from pathlib import Path

NUM_PLOT_POINTS = 120  # points per reference curve on the Moody chart
FIGS_PATH = Path(__file__).parent.parent / "figs"

# regime bounds
RE_TURB_MIN = 2.3e3  # laminar admissible below, turbulent admissible at or above
RE_LAM_MAX = 4e3  # laminar candidates in [RE_TURB_MIN, RE_LAM_MAX) get an advisory

# relative roughness domain
EPS_MAX = 5e-2

# root finders
F_GUESS = 1e-2
NEWTON_TOL = 1e-4
NEWTON_MAX_ITER = 50
RE_BRACKET = (1e3, 1e8)
F_BRACKET = (1e-4, 1e1)  # brentq fallback when newton on f fails
BRENTQ_TOL = 1e-12
BISECT_TOL = 1e-4
BISECT_MAX_ITER = 200

# legacy damped multiplicative search
LEGACY_RE_START = 1e4
LEGACY_STEP = 0.02
LEGACY_REL_TOL = 5e-3
LEGACY_MAX_ITER = 10000

# Moody chart
CHART_RE_LIMITS = (1e2, 1e8)
CHART_F_LIMITS = (6e-3, 1e-1)
CHART_F_TICKS = ("0.006", "0.01", "0.015", "0.02", "0.03", "0.05", "0.1")
CHART_EPS_TICKS = (
    "0.00001",
    "0.00003",
    "0.0001",
    "0.0003",
    "0.001",
    "0.003",
    "0.01",
    "0.02",
    "0.05",
)
