import warp as wp
import numpy as np
from simulator import FluidSimulator_WARP
from utils.scene import Scene, DISPLAY_MODES
from utils.pointers import Pointer, PointerTracker
wp.init()

class Sim_Wrapper:
    def __init__(self, scene=None, scene_file=None, device=None, seed=None):
        """
        Initialize simulation wrapper.

        Args:
            scene: Scene object to use (if provided)
            scene_file: Path to JSON scene file (if provided, scene is ignored)
            device: Device to use for simulation (default: current warp device)
            seed: Seed for pointer colors
        """
        self.device = device
        if scene_file:
            self.scene = Scene.from_json(scene_file)
        elif scene:
            self.scene = scene
        else:
            # Default scene: two opposing jets meeting in the middle
            self.scene = Scene()
            self.scene.add_splat_event(0, [0.2, 0.5], [0.05, 0.0], [1.0, 0.2, 0.1], duration=30)
            self.scene.add_splat_event(0, [0.8, 0.5], [-0.05, 0.0], [0.1, 0.4, 1.0], duration=30)

        self.solver = FluidSimulator_WARP(
            sim_width=self.scene.sim_width,
            sim_height=self.scene.sim_height,
            dye_width=self.scene.dye_width,
            dye_height=self.scene.dye_height,
            dye_channels=self.scene.dye_channels,
            params=self.scene.params,
            device=device,
        )
        print(
            f"Simulation grid {self.scene.sim_width}x{self.scene.sim_height}, "
            f"dye grid {self.scene.dye_width}x{self.scene.dye_height}, "
            f"{len(self.scene.splat_events)} scripted splats"
        )

        self.pointers = PointerTracker(seed=seed)

        # Track current frame
        self.current_frame = 0

    @property
    def params(self):
        return self.solver.params

    def scripted_pointers(self, frame):
        """Scripted splats active at `frame`, as pointers the solver can splat."""
        return [
            Pointer(-(i + 1), event.point[0], event.point[1], event.color,
                    dx=event.force[0], dy=event.force[1])
            for i, event in enumerate(self.scene.get_splat_events_at_frame(frame))
        ]

    def step(self, dt=None):
        if dt is None:
            dt = self.scene.dt

        for i in range(self.scene.frames_per_output):
            pointers = self.scripted_pointers(self.current_frame) + self.pointers.active()
            self.solver.step(dt, pointers)

            # Increment frame counter
            self.current_frame += 1

    def resize(self, sim_width, sim_height, dye_width=None, dye_height=None):
        self.solver.resize(sim_width, sim_height, dye_width, dye_height)

    def get_velocity(self):
        return self.solver.export_velocity_to_torch().cpu().numpy().copy()

    def get_pressure(self):
        return self.solver.export_pressure_to_torch().cpu().numpy().copy()

    def get_dye(self):
        return self.solver.export_dye_to_torch().cpu().numpy().copy()

    def get_display(self, mode=None):
        if mode is None:
            mode = self.scene.display
        if mode == "dye":
            return self.get_dye()
        elif mode == "velocity":
            return self.get_velocity()
        elif mode == "pressure":
            return self.get_pressure()
        else:
            raise ValueError(f"Unknown display mode: {mode}. Must be one of {DISPLAY_MODES}")
