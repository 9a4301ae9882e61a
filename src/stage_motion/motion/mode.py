"""Per-tick regime selection with sticky trapezoid hysteresis."""

from __future__ import annotations

import math

import structlog

from stage_motion.core.config import MotionParams
from stage_motion.core.state import AxisState, LinearConst, MoveMode, Trapezoid

logger = structlog.get_logger()

# Targets closer than this are treated as unchanged
TARGET_EPSILON = 1e-6


def linear_velocity_command(theta: float, target: float, params: MotionParams) -> float:
    """Signed constant speed for a small move, proportional to the initial delta."""
    delta = target - theta
    if delta == 0.0:
        return 0.0
    speed = min(params.k_small * abs(delta), params.v_max)
    return math.copysign(speed, delta)


def select_mode(
    state: AxisState,
    target: float,
    params: MotionParams,
    axis: str = "axis",
) -> MoveMode:
    """
    Pick this tick's regime and update ``state.regime`` / ``state.mode``.

    Once a large move has engaged the trapezoid regime it stays there until
    arrival, even after the remaining distance drops under ``small_thresh``.
    """
    if isinstance(state.regime, Trapezoid):
        state.mode = MoveMode.TRAPEZOID
        return state.mode

    distance = abs(target - state.theta)
    if distance <= params.small_thresh:
        regime = state.regime
        if (
            not isinstance(regime, LinearConst)
            or abs(regime.last_target - target) > TARGET_EPSILON
        ):
            state.regime = LinearConst(
                v_cmd=linear_velocity_command(state.theta, target, params),
                last_target=target,
            )
            logger.debug(
                "Linear move armed",
                axis=axis,
                target=target,
                v_cmd=state.regime.v_cmd,
            )
        state.mode = MoveMode.LINEAR_CONST
        return state.mode

    state.regime = Trapezoid()
    state.mode = MoveMode.TRAPEZOID
    logger.debug("Trapezoid lock engaged", axis=axis, target=target, distance=distance)
    return state.mode
