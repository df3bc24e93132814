"""
Physical Defaults for Pipe-Flow Calculations

Default fluid and gravity values used by the head-loss entry points,
expressed in cgs units (cm, g, s). Callers working in another consistent
system of units must pass all of these explicitly.
"""

# Standard acceleration due to gravity
G = 981.0  # cm/s^2

# Water at 25 C
RHO_WATER_25C = 0.997  # g/cm^3
MU_WATER_25C = 0.0091  # g/(cm.s), i.e. poise
