"""
Trapezoid integrator: accel -> cruise -> decel for large moves.

Each tick applies, in order:
- stop-distance braking decision using ``a_max`` for both accel and decel
- weaker braking while the axis is still moving away from the target
- a jerk cap on the per-tick velocity change (``j_max * dt^2``)
- the ``v_max`` cruise limit
- a stop-distance clamp so the axis can always halt exactly on target
"""

from __future__ import annotations

import math
from typing import NamedTuple

from stage_motion.core.config import MotionParams

# a_max floor, keeps stop-distance math finite
A_MAX_FLOOR = 1e-3


class StepResult(NamedTuple):
    """Outcome of advancing one axis by one tick."""

    theta: float
    velocity: float
    acceleration: float
    arrived: bool


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def crossed_target(target: float, before: float, after: float) -> bool:
    """True when a step from ``before`` to ``after`` reached or passed ``target``."""
    d_before = target - before
    d_after = target - after
    return d_after == 0.0 or (d_before > 0.0) != (d_after > 0.0)


def step_trapezoid(
    theta: float,
    velocity: float,
    target: float,
    params: MotionParams,
    dt: float,
) -> StepResult:
    """Advance one jerk-limited trapezoid tick toward ``target``."""
    distance = target - theta
    remaining = abs(distance)
    if remaining == 0.0 or (remaining <= params.snap_pos and abs(velocity) <= params.snap_vel):
        return StepResult(target, 0.0, 0.0, True)

    direction = math.copysign(1.0, distance)
    a_full = max(params.a_max, A_MAX_FLOOR)
    heading = velocity * direction  # > 0 closing in, < 0 moving away

    stop_dist = velocity * velocity / (2.0 * a_full)
    if heading > 0.0 and stop_dist >= remaining:
        a_target = -direction * a_full
    else:
        a_target = direction * a_full

    # Weaker braking while reversing
    if heading < 0.0:
        scale = _clamp(params.reverse_brake_scale, 0.0, 1.0)
        a_target = _clamp(a_target, -scale * a_full, scale * a_full)

    dv_cap = params.j_max * dt * dt
    dv = _clamp(a_target * dt, -dv_cap, dv_cap)
    v = velocity + dv

    # Braking brings the axis to rest, it never turns it around
    if heading > 0.0 and v * direction < 0.0:
        dv = -velocity
        v = 0.0

    v = _clamp(v, -params.v_max, params.v_max)

    v_allow = math.sqrt(2.0 * a_full * remaining)
    if abs(v) > v_allow:
        v = math.copysign(v_allow, v)

    theta_next = theta + v * dt
    if crossed_target(target, theta, theta_next):
        return StepResult(target, 0.0, 0.0, True)
    if abs(target - theta_next) <= params.snap_pos and abs(v) <= params.snap_vel:
        return StepResult(target, 0.0, 0.0, True)

    acceleration = dv / dt if dt > 0.0 else 0.0
    return StepResult(theta_next, v, acceleration, False)
