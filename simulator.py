import warp as wp

from utils.fields import Field, DoubleBufferedField
from utils.params import SimulationParameters

from operators import *

class FluidSimulator_WARP:
    def __init__(self, sim_width=128, sim_height=128, dye_width=512, dye_height=512,
                 dye_channels=3, params=None, device=None):
        """
        Simulation context owning every field and the parameters read each tick.

        Args:
            sim_width, sim_height: Velocity and pressure grid resolution
            dye_width, dye_height: Dye grid resolution, independent of the velocity grid
            dye_channels: 3 for RGB dye, 4 for RGBA
            params: SimulationParameters, defaults if None
            device: Warp device, defaults to the current warp device
        """
        if device is None:
            device = wp.get_device()
        self.device = device
        self.params = params if params is not None else SimulationParameters()
        self.time = 0.0
        self.frame = 0

        self.velocity = DoubleBufferedField(sim_width, sim_height, 2, device=device)
        self.pressure = DoubleBufferedField(sim_width, sim_height, 1, device=device)
        self.dye = DoubleBufferedField(dye_width, dye_height, dye_channels, device=device)
        self.allocate_scratch_fields()

    def allocate_scratch_fields(self):
        width, height = self.velocity.shape
        self.divergence = Field(width, height, 1, device=self.device)
        self.pressure_gradient = Field(width, height, 2, device=self.device)

    @property
    def aspect_ratio(self):
        return self.velocity.width / self.velocity.height

    def resize(self, sim_width, sim_height, dye_width=None, dye_height=None):
        """
        Rebuild the fields at a new resolution. Velocity, pressure and dye keep
        their contents (bilinearly resampled); scratch fields are reallocated.
        """
        if dye_width is None:
            dye_width = self.dye.width
        if dye_height is None:
            dye_height = self.dye.height

        self.velocity = self.velocity.resized(sim_width, sim_height)
        self.pressure = self.pressure.resized(sim_width, sim_height)
        self.dye = self.dye.resized(dye_width, dye_height)
        self.allocate_scratch_fields()

        print(f"Fields resized: simulation {sim_width}x{sim_height}, dye {dye_width}x{dye_height}")

    def apply_pointer(self, pointer):
        params = self.params
        splat(
            self.velocity,
            (pointer.x, pointer.y),
            (pointer.dx * params.splat_force, pointer.dy * params.splat_force),
            params.splat_radius,
            self.aspect_ratio,
        )
        color = [c * params.dye_deposit for c in pointer.color[:3]]
        # alpha of an RGBA dye field accumulates deposited density
        color = (color + [0.0, 0.0, 0.0, params.dye_deposit][len(color):])[:self.dye.channels]
        splat(self.dye, (pointer.x, pointer.y), color, params.splat_radius, self.aspect_ratio)

    def step(self, dt, pointers=()):
        """
        Advance the simulation by one frame.

        The order is fixed and every stage runs each tick, including dt <= 0:
        pointer splats, velocity self-advection, dye advection, viscous
        diffusion, pressure projection.
        """
        params = self.params

        for pointer in pointers:
            self.apply_pointer(pointer)

        apply_boundary(self.velocity, VELOCITY_BOUNDARY)
        advect(self.velocity.read, self.velocity, dt, params.velocity_dissipation)

        apply_boundary(self.dye, DYE_BOUNDARY)
        advect(self.velocity.read, self.dye, dt, params.dye_dissipation)

        apply_boundary(self.velocity, VELOCITY_BOUNDARY)
        diffuse(self.velocity, params.viscosity, dt, params.diffusion_iterations)

        project(
            self.velocity,
            self.pressure,
            self.divergence,
            self.pressure_gradient,
            params.pressure_retention,
            params.pressure_iterations,
        )

        self.time = self.time + dt
        self.frame += 1

    def export_velocity_to_torch(self):
        return wp.to_torch(self.velocity.read.data)

    def export_pressure_to_torch(self):
        return wp.to_torch(self.pressure.read.data)

    def export_dye_to_torch(self):
        return wp.to_torch(self.dye.read.data)
