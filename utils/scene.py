"""
Scene data structure for managing simulation parameters, grid resolutions and scripted splats.
"""
import json
from typing import List, Dict, Optional

from utils.params import SimulationParameters

DISPLAY_MODES = ("dye", "velocity", "pressure")


class SplatEvent:
    """A scripted splat applied for `duration` frames starting at `frame`."""
    def __init__(self, frame: int, point: List[float], force: List[float],
                 color: List[float], duration: int = 1):
        self.frame = frame
        self.point = point
        self.force = force
        self.color = color
        self.duration = duration

    def is_active(self, frame: int) -> bool:
        return self.frame <= frame < self.frame + self.duration


class Scene:
    """Scene data structure containing simulation parameters and events."""

    def __init__(self, dt: float = 1.0 / 60.0,
                 sim_width: int = 128, sim_height: int = 128,
                 dye_width: int = 512, dye_height: int = 512,
                 dye_channels: int = 3,
                 params: Optional[SimulationParameters] = None,
                 display: str = "dye",
                 frames_per_output: int = 1):
        """
        Initialize a scene.

        Args:
            dt: Time step size
            sim_width, sim_height: Velocity / pressure grid resolution
            dye_width, dye_height: Dye grid resolution
            dye_channels: 3 (RGB) or 4 (RGBA) dye channels
            params: SimulationParameters, defaults if None
            display: Field shown by the viewer, one of "dye", "velocity", "pressure"
            frames_per_output: Number of simulation frames to run between outputs
        """
        if display not in DISPLAY_MODES:
            raise ValueError(f"Unknown display mode: {display}. Must be one of {DISPLAY_MODES}")

        self.dt = dt
        self.sim_width = sim_width
        self.sim_height = sim_height
        self.dye_width = dye_width
        self.dye_height = dye_height
        self.dye_channels = dye_channels
        self.params = params if params is not None else SimulationParameters()
        self.display = display
        self.frames_per_output = frames_per_output

        self.splat_events: List[SplatEvent] = []

    def add_splat_event(self, frame: int, point: List[float], force: List[float],
                        color: List[float], duration: int = 1):
        """Add a scripted splat starting at a specific frame."""
        event = SplatEvent(frame, point, force, color, duration)
        self.splat_events.append(event)
        # Sort by frame
        self.splat_events.sort(key=lambda e: e.frame)

    def get_splat_events_at_frame(self, frame: int) -> List[SplatEvent]:
        """Get all splat events active at a specific frame."""
        return [event for event in self.splat_events if event.is_active(frame)]

    def to_dict(self) -> Dict:
        """Convert scene to dictionary for JSON serialization."""
        data = {
            "dt": self.dt,
            "sim_width": self.sim_width,
            "sim_height": self.sim_height,
            "dye_width": self.dye_width,
            "dye_height": self.dye_height,
            "dye_channels": self.dye_channels,
            "display": self.display,
            "frames_per_output": self.frames_per_output,
            "splat_events": [
                {
                    "frame": e.frame,
                    "point": e.point,
                    "force": e.force,
                    "color": e.color,
                    "duration": e.duration
                }
                for e in self.splat_events
            ],
        }
        data.update(self.params.to_dict())
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> 'Scene':
        """Create scene from dictionary. Simulation parameters are read from the same flat mapping."""
        scene = cls(
            dt=data.get("dt", 1.0 / 60.0),
            sim_width=data.get("sim_width", 128),
            sim_height=data.get("sim_height", 128),
            dye_width=data.get("dye_width", 512),
            dye_height=data.get("dye_height", 512),
            dye_channels=data.get("dye_channels", 3),
            params=SimulationParameters.from_dict(data),
            display=data.get("display", "dye"),
            frames_per_output=data.get("frames_per_output", 1)
        )

        for event_data in data.get("splat_events", []):
            scene.add_splat_event(
                frame=event_data["frame"],
                point=event_data["point"],
                force=event_data["force"],
                color=event_data.get("color", [1.0, 1.0, 1.0]),
                duration=event_data.get("duration", 1)
            )

        return scene

    @classmethod
    def from_json(cls, filepath: str) -> 'Scene':
        """Load scene from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)

    def to_json(self, filepath: str):
        """Save scene to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
