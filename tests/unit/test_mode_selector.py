from __future__ import annotations

import pytest

from stage_motion.core.config import MotionParams
from stage_motion.core.state import AxisState, LinearConst, MoveMode, Trapezoid
from stage_motion.motion.mode import linear_velocity_command, select_mode


def test_small_distance_selects_linear_with_signed_speed() -> None:
    params = MotionParams(k_small=2.0, small_thresh=20.0)
    state = AxisState(theta=50.0)

    mode = select_mode(state, 40.0, params)

    assert mode is MoveMode.LINEAR_CONST
    assert state.mode is MoveMode.LINEAR_CONST
    assert state.lin_initialized is True
    assert state.lin_v_cmd == pytest.approx(-20.0)
    assert state.last_target == 40.0


def test_linear_speed_is_capped_at_v_max() -> None:
    params = MotionParams(v_max=300.0, k_small=10.0, small_thresh=80.0)

    assert linear_velocity_command(0.0, 50.0, params) == pytest.approx(300.0)
    assert linear_velocity_command(0.0, -50.0, params) == pytest.approx(-300.0)
    assert linear_velocity_command(5.0, 5.0, params) == 0.0


def test_distance_at_threshold_is_still_linear() -> None:
    params = MotionParams(small_thresh=80.0)
    state = AxisState(theta=0.0)

    assert select_mode(state, 80.0, params) is MoveMode.LINEAR_CONST


def test_large_distance_engages_trapezoid_lock() -> None:
    params = MotionParams(small_thresh=80.0)
    state = AxisState(theta=0.0)

    mode = select_mode(state, 81.0, params)

    assert mode is MoveMode.TRAPEZOID
    assert state.lock_trapezoid is True
    assert isinstance(state.regime, Trapezoid)


def test_lock_overrides_small_remaining_distance() -> None:
    params = MotionParams(small_thresh=80.0)
    state = AxisState(theta=99.0, regime=Trapezoid())

    assert select_mode(state, 100.0, params) is MoveMode.TRAPEZOID
    assert state.lock_trapezoid is True


def test_unchanged_target_keeps_linear_command() -> None:
    params = MotionParams(k_small=1.5, small_thresh=80.0)
    state = AxisState(theta=5.0, regime=LinearConst(v_cmd=15.0, last_target=10.0))

    select_mode(state, 10.0 + 1e-9, params)

    assert state.lin_v_cmd == 15.0
    assert state.last_target == 10.0


def test_changed_target_recomputes_linear_command() -> None:
    params = MotionParams(k_small=1.5, small_thresh=80.0)
    state = AxisState(theta=5.0, regime=LinearConst(v_cmd=15.0, last_target=10.0))

    select_mode(state, 15.0, params)

    assert state.lin_v_cmd == pytest.approx(15.0)
    assert state.last_target == 15.0

    select_mode(state, 25.0, params)

    assert state.lin_v_cmd == pytest.approx(30.0)


def test_linear_state_switches_to_trapezoid_on_large_retarget() -> None:
    params = MotionParams(small_thresh=80.0)
    state = AxisState(theta=5.0, regime=LinearConst(v_cmd=7.5, last_target=10.0))

    assert select_mode(state, 300.0, params) is MoveMode.TRAPEZOID
    assert state.lin_initialized is False
    assert state.lin_v_cmd == 0.0
