from numpy import pi


def calc_reynolds(v: float, D: float, nu: float) -> float:
    return v * D / nu


def diameter_from_velocity(re: float, v: float, nu: float) -> float:
    return re * nu / v


def diameter_from_flow_rate(re: float, Q: float, nu: float) -> float:
    return 4 * Q / (pi * re * nu)


def relative_roughness(thk: float, D: float) -> float:
    return thk / D
