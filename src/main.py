import logging

from coupling import VelocityCoupling
from dimensionless_numbers import calc_reynolds
from friction_factor import FrictionFactorSolver, SolverOptions
from head_loss import solve_head_diameter, solve_head_flow_rate, solve_head_velocity
from moody_chart import MoodyChart
from utilities.answer import format_sigfigs, print_solutions

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# worked examples, cgs units
h, L, g, mu, rho = 40, 2.5e3, 981, 8.9e-3, 0.989
v, Q, eps = 1e2, 8.6e3, 2.5e-3

solver = FrictionFactorSolver()

hv = solve_head_velocity(h, v, L, eps=eps, rho=rho, mu=mu, g=g)
print_solutions("head loss + velocity", hv)

hv_legacy = solve_head_velocity(
    h, v, L, eps=eps, rho=rho, mu=mu, g=g, options=SolverOptions(strategy="legacy")
)
print_solutions("head loss + velocity (damped search)", hv_legacy)

print_solutions("head loss + flow rate", solve_head_flow_rate(h, Q, L, eps=eps, rho=rho, mu=mu, g=g))
print_solutions("head loss + diameter", solve_head_diameter(h, 2.5, L, eps=eps, rho=rho, mu=mu, g=g))

# absolute roughness 0.27 mm, default water properties
hv_thk = solve_head_velocity(40, 1.1e2, 2.5e3, thk=2.7e-2)
print_solutions("head loss + velocity, roughness length", hv_thk)

f2re = solver.f_to_re(2.8e-2, 1e-3)
print_solutions("Re from f = 0.028, eps = 0.001", f2re)

coupling = VelocityCoupling.from_head_loss(h=h, v=v, L=L, rho=rho, mu=mu, g=g)
D = coupling.diameter(hv[0].reynolds)
print(f"pipe diameter: {format_sigfigs(D)} cm (Re check: {format_sigfigs(calc_reynolds(v, D, mu / rho))})")

chart = MoodyChart(eps=eps, solver=solver)
chart.add_coupling_line(coupling, hv)
chart.add_solutions(hv)
chart.save(name="head_velocity")

chart = MoodyChart(eps=1e-3, solver=solver)
chart.add_friction_line(2.8e-2)
chart.add_solutions(f2re)
chart.save(name="f_to_re")
