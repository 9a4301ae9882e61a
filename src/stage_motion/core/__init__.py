"""Core system components for Stage Motion."""

from stage_motion.core.state import AxisState, LinearConst, MoveMode, Trapezoid
from stage_motion.core.config import AngleRange, AxisConfig, MotionParams, Settings
from stage_motion.core.exceptions import (
    MotionError,
    ConfigError,
    AxisConfigError,
    FixtureProfileError,
    SequenceError,
)

__all__ = [
    "AxisState",
    "LinearConst",
    "MoveMode",
    "Trapezoid",
    "AngleRange",
    "AxisConfig",
    "MotionParams",
    "Settings",
    "MotionError",
    "ConfigError",
    "AxisConfigError",
    "FixtureProfileError",
    "SequenceError",
]
