"""Linear-constant integrator for small corrective moves."""

from __future__ import annotations

from stage_motion.motion.trapezoid import StepResult, crossed_target


def step_linear_const(
    theta: float,
    v_cmd: float,
    target: float,
    snap_pos: float,
    dt: float,
) -> StepResult:
    """
    Move at the fixed signed speed ``v_cmd`` with no deceleration ramp.

    Snaps onto the target when already inside ``snap_pos`` or when the step
    would reach or pass it.
    """
    if abs(target - theta) <= snap_pos:
        return StepResult(target, 0.0, 0.0, True)

    theta_next = theta + v_cmd * dt
    if crossed_target(target, theta, theta_next):
        return StepResult(target, 0.0, 0.0, True)

    return StepResult(theta_next, v_cmd, 0.0, False)
