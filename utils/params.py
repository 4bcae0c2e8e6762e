"""
Simulation parameters read by the integrator every tick.
"""
from typing import Dict

from operators.diffuse import DIFFUSION_ITERATIONS
from operators.jacobi_pressure_iteration import PRESSURE_ITERATIONS


class SimulationParameters:
    """Plain parameter holder. Values are used as given, no range checks."""

    def __init__(self, viscosity: float = 1e-4,
                 pressure_retention: float = 0.8,
                 splat_radius: float = 0.005,
                 splat_force: float = 10.0,
                 dye_deposit: float = 0.2,
                 velocity_dissipation: float = 0.99,
                 dye_dissipation: float = 0.99,
                 diffusion_iterations: int = DIFFUSION_ITERATIONS,
                 pressure_iterations: int = PRESSURE_ITERATIONS):
        """
        Args:
            viscosity: Kinematic viscosity used by the diffusion solve
            pressure_retention: Fraction of last frame's pressure used to seed the pressure solve
            splat_radius: Gaussian width of pointer splats
            splat_force: Scale from pointer displacement to injected velocity
            dye_deposit: Scale from pointer color to deposited dye
            velocity_dissipation: Multiplier applied to advected velocity
            dye_dissipation: Multiplier applied to advected dye
            diffusion_iterations: Jacobi iterations for the diffusion solve
            pressure_iterations: Jacobi iterations for the pressure solve
        """
        self.viscosity = viscosity
        self.pressure_retention = pressure_retention
        self.splat_radius = splat_radius
        self.splat_force = splat_force
        self.dye_deposit = dye_deposit
        self.velocity_dissipation = velocity_dissipation
        self.dye_dissipation = dye_dissipation
        self.diffusion_iterations = diffusion_iterations
        self.pressure_iterations = pressure_iterations

    def to_dict(self) -> Dict:
        return {
            "viscosity": self.viscosity,
            "pressure_retention": self.pressure_retention,
            "splat_radius": self.splat_radius,
            "splat_force": self.splat_force,
            "dye_deposit": self.dye_deposit,
            "velocity_dissipation": self.velocity_dissipation,
            "dye_dissipation": self.dye_dissipation,
            "diffusion_iterations": self.diffusion_iterations,
            "pressure_iterations": self.pressure_iterations,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'SimulationParameters':
        defaults = cls()
        return cls(
            viscosity=data.get("viscosity", defaults.viscosity),
            pressure_retention=data.get("pressure_retention", defaults.pressure_retention),
            splat_radius=data.get("splat_radius", defaults.splat_radius),
            splat_force=data.get("splat_force", defaults.splat_force),
            dye_deposit=data.get("dye_deposit", defaults.dye_deposit),
            velocity_dissipation=data.get("velocity_dissipation", defaults.velocity_dissipation),
            dye_dissipation=data.get("dye_dissipation", defaults.dye_dissipation),
            diffusion_iterations=int(data.get("diffusion_iterations", defaults.diffusion_iterations)),
            pressure_iterations=int(data.get("pressure_iterations", defaults.pressure_iterations)),
        )
