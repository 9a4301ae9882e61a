"""
Profile preview: a synthetic 0 -> limit trapezoid run.

Samples position, velocity, effective acceleration and effective jerk at a
fixed tick so the shape of a tuning (jerk ramp, cruise, stop clamp) can be
inspected or plotted without driving a fixture.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from stage_motion.core.config import MotionParams
from stage_motion.motion.trapezoid import step_trapezoid


@dataclass
class ProfilePreview:
    """Sampled trajectory of a single trapezoid move."""

    target: float
    time: np.ndarray
    position: np.ndarray
    velocity: np.ndarray
    acceleration: np.ndarray
    jerk: np.ndarray
    arrived: bool

    @property
    def duration(self) -> float:
        return float(self.time[-1]) if len(self.time) else 0.0

    @property
    def peak_velocity(self) -> float:
        return float(np.max(np.abs(self.velocity))) if len(self.velocity) else 0.0

    @property
    def peak_acceleration(self) -> float:
        return float(np.max(np.abs(self.acceleration))) if len(self.acceleration) else 0.0

    def __len__(self) -> int:
        return len(self.time)


def preview_profile(
    params: MotionParams,
    target: float,
    dt: float = 1.0 / 240.0,
    max_duration_s: float = 10.0,
) -> ProfilePreview:
    """Simulate a move from rest at 0 deg to ``target`` deg."""
    t = 0.0
    x = 0.0
    v = 0.0
    a_prev = 0.0
    arrived = False

    times: list[float] = []
    pos: list[float] = []
    vel: list[float] = []
    acc: list[float] = []
    jerk: list[float] = []

    while t <= max_duration_s:
        result = step_trapezoid(x, v, target, params, dt)

        # Effective values, including the stop-distance clamp
        a_eff = (result.velocity - v) / dt
        times.append(t)
        pos.append(x)
        vel.append(v)
        acc.append(a_eff)
        jerk.append((a_eff - a_prev) / dt)
        a_prev = a_eff

        x, v = result.theta, result.velocity
        t += dt

        if result.arrived:
            times.append(t)
            pos.append(target)
            vel.append(0.0)
            acc.append(0.0)
            jerk.append(0.0)
            arrived = True
            break

    return ProfilePreview(
        target=target,
        time=np.asarray(times, dtype=np.float64),
        position=np.asarray(pos, dtype=np.float64),
        velocity=np.asarray(vel, dtype=np.float64),
        acceleration=np.asarray(acc, dtype=np.float64),
        jerk=np.asarray(jerk, dtype=np.float64),
        arrived=arrived,
    )
