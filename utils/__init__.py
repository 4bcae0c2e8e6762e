"""
Utils package for grid fields, scenes, parameters and pointer input.
"""
from .fields import Field, DoubleBufferedField, check_same_grid
from .params import SimulationParameters
from .pointers import Pointer, PointerTracker
from .scene import Scene, SplatEvent, DISPLAY_MODES

__all__ = [
    'Field',
    'DoubleBufferedField',
    'check_same_grid',
    'SimulationParameters',
    'Pointer',
    'PointerTracker',
    'Scene',
    'SplatEvent',
    'DISPLAY_MODES',
]
