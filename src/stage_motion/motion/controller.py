"""
Axis Controller: one motion-profile controller per rotational axis.

Owns the axis state and tuning, maps 0..1 targets into degrees through
the axis angle range, and advances the axis one tick at a time.

Caller contract: target fractions must be finite and in [0, 1]; ``dt``
must be finite and non-negative.
"""

from __future__ import annotations

from typing import Optional

import structlog

from stage_motion.core.config import AngleRange, AxisConfig, MotionParams
from stage_motion.core.state import AxisState, MoveMode
from stage_motion.motion.linear import step_linear_const
from stage_motion.motion.mode import select_mode
from stage_motion.motion.trapezoid import StepResult, step_trapezoid

logger = structlog.get_logger()


class AxisController:
    """Jerk-limited pan or tilt controller for a single axis."""

    def __init__(
        self,
        params: MotionParams,
        angle_range: Optional[AngleRange] = None,
        name: str = "axis",
        state: Optional[AxisState] = None,
    ):
        self.params = params
        self.range = angle_range or AngleRange()
        self.name = name
        self.state = state or AxisState(theta=self.range.start_deg)
        self.target = self.state.theta
        self.arrived = self.state.at_rest(self.target)

    @classmethod
    def from_config(cls, config: AxisConfig, name: str) -> "AxisController":
        return cls(params=config.params, angle_range=config.range, name=name)

    @property
    def angle(self) -> float:
        return self.state.theta

    @property
    def fraction(self) -> float:
        """Current angle renormalized to 0..1."""
        return self.range.to_fraction(self.state.theta)

    @property
    def mode(self) -> MoveMode:
        return self.state.mode

    def reset(self, degrees: float) -> None:
        """Place the axis at rest on ``degrees`` with nothing engaged."""
        self.state = AxisState(theta=degrees)
        self.target = degrees
        self.arrived = True

    def set_target(self, fraction: float) -> None:
        """Set the target as a 0..1 fraction of the axis range."""
        self.set_target_degrees(self.range.to_degrees(fraction))

    def set_target_degrees(self, degrees: float) -> None:
        self.target = degrees
        self.arrived = self.state.at_rest(degrees)

    def step(self, dt: float) -> float:
        """Advance one tick of ``dt`` seconds and return the angle in degrees."""
        state = self.state
        if dt == 0.0 or state.at_rest(self.target):
            self.arrived = state.at_rest(self.target)
            return state.theta

        mode = select_mode(state, self.target, self.params, axis=self.name)
        if mode is MoveMode.TRAPEZOID:
            result = step_trapezoid(
                state.theta, state.velocity, self.target, self.params, dt
            )
        else:
            result = step_linear_const(
                state.theta, state.lin_v_cmd, self.target, self.params.snap_pos, dt
            )
        self._apply(result, mode)
        return state.theta

    def _apply(self, result: StepResult, mode: MoveMode) -> None:
        if result.arrived:
            self.state.snap_to(self.target)
            if not self.arrived:
                logger.debug(
                    "Axis arrived",
                    axis=self.name,
                    angle=self.target,
                    mode=mode.value,
                )
        else:
            self.state.theta = result.theta
            self.state.velocity = result.velocity
            self.state.acceleration = result.acceleration
        self.arrived = result.arrived
