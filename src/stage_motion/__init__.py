"""
Stage Motion: pan/tilt motion-profile control for moving-head stage lights

Drives each rotational axis of a moving head with a jerk-limited trapezoid
profile for large sweeps and a constant-speed profile for small corrective
moves, with sticky hysteresis between the two.
"""

__version__ = "0.1.0"

from stage_motion.core.config import MotionParams, Settings
from stage_motion.core.state import AxisState, MoveMode
from stage_motion.motion.controller import AxisController

__all__ = [
    "AxisController",
    "AxisState",
    "MotionParams",
    "MoveMode",
    "Settings",
    "__version__",
]
