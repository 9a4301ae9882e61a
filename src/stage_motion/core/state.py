"""
Per-axis runtime state for the motion controller.

The control regime is held as a single tagged value instead of a set of
loose flags:

- ``None``: re-armed, nothing engaged (initial state and after arrival)
- ``LinearConst``: small corrective move at a fixed signed velocity
- ``Trapezoid``: large move under full kinematic limiting; being in this
  regime *is* the hysteresis lock, it is only left on arrival
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class MoveMode(Enum):
    """Regime used for the most recent tick."""

    LINEAR_CONST = "linear_const"
    TRAPEZOID = "trapezoid"


@dataclass(frozen=True)
class LinearConst:
    """Constant-velocity regime, fixed at entry or on target change."""

    v_cmd: float  # signed deg/s
    last_target: float  # deg


@dataclass(frozen=True)
class Trapezoid:
    """Jerk-limited accel/cruise/decel regime (locked until arrival)."""


Regime = Union[LinearConst, Trapezoid]


@dataclass
class AxisState:
    """Mutable state of one rotational axis."""

    theta: float = 0.0  # deg
    velocity: float = 0.0  # deg/s
    acceleration: float = 0.0  # deg/s^2, only meaningful in Trapezoid
    mode: MoveMode = MoveMode.LINEAR_CONST
    regime: Optional[Regime] = None

    @property
    def lock_trapezoid(self) -> bool:
        return isinstance(self.regime, Trapezoid)

    @property
    def lin_initialized(self) -> bool:
        return isinstance(self.regime, LinearConst)

    @property
    def lin_v_cmd(self) -> float:
        if isinstance(self.regime, LinearConst):
            return self.regime.v_cmd
        return 0.0

    @property
    def last_target(self) -> Optional[float]:
        if isinstance(self.regime, LinearConst):
            return self.regime.last_target
        return None

    def at_rest(self, target: float) -> bool:
        """True when the axis sits exactly on ``target`` with no motion."""
        return self.theta == target and self.velocity == 0.0 and self.acceleration == 0.0

    def snap_to(self, target: float) -> None:
        """Exact arrival: land on target, zero motion, re-arm mode selection."""
        self.theta = target
        self.velocity = 0.0
        self.acceleration = 0.0
        self.regime = None
