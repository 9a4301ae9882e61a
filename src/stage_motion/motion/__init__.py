"""Per-axis motion-profile controller."""

from stage_motion.motion.controller import AxisController
from stage_motion.motion.linear import step_linear_const
from stage_motion.motion.mode import linear_velocity_command, select_mode
from stage_motion.motion.preview import ProfilePreview, preview_profile
from stage_motion.motion.trapezoid import StepResult, step_trapezoid

__all__ = [
    "AxisController",
    "StepResult",
    "select_mode",
    "linear_velocity_command",
    "step_trapezoid",
    "step_linear_const",
    "ProfilePreview",
    "preview_profile",
]
