from __future__ import annotations

import pytest

from stage_motion.core.config import DMXPatchConfig, FixtureConfig
from stage_motion.core.exceptions import AxisConfigError, FixtureProfileError
from stage_motion.dmx.universe import create_universe_buffer
from stage_motion.fixture.moving_head import MovingHead


def test_axes_are_driven_independently() -> None:
    fixture = MovingHead(FixtureConfig())
    fixture.set_target("pan", 1.0)

    for _ in range(10):
        pan_deg, tilt_deg = fixture.step(1.0 / 60.0)

    assert pan_deg > 0.0
    assert tilt_deg == 0.0
    assert fixture.tilt.arrived is True
    assert fixture.pan.arrived is False


def test_fixture_converges_on_both_axes() -> None:
    fixture = MovingHead(FixtureConfig())
    fixture.set_target("pan", 1.0)
    fixture.set_target("tilt", 0.5)

    for _ in range(5_000):
        fixture.step(1.0 / 60.0)
        if fixture.arrived:
            break

    assert fixture.arrived
    assert fixture.pan.angle == 540.0
    assert fixture.tilt.angle == 90.0


def test_dmx_command_packs_pose_and_color() -> None:
    fixture = MovingHead(FixtureConfig(color_rgb=(1.0, 0.5, 0.0)))
    fixture.pan.reset(270.0)
    fixture.tilt.reset(180.0)

    command = fixture.dmx_command()
    values = command["channel_values"]

    assert command["fixture_id"] == "beam-1"
    assert command["fixture_type"] == "moving_head"
    assert values[82] == 128
    assert values[83] == 255
    assert values[85] == 255
    assert values[87] == 255
    assert values[88] == 128
    assert values[89] == 0
    assert values[90] == 0


def test_write_universe_leaves_start_code_and_other_channels() -> None:
    fixture = MovingHead(FixtureConfig())
    fixture.tilt.reset(90.0)
    universe = create_universe_buffer()
    universe[1] = 42

    fixture.write_universe(universe)

    assert universe[0] == 0
    assert universe[1] == 42
    assert universe[83] == 128
    assert universe[85] == 255


def test_patch_beyond_universe_is_rejected() -> None:
    config = FixtureConfig(patch=DMXPatchConfig(rgbw_start=510))

    with pytest.raises(FixtureProfileError):
        MovingHead(config)


def test_unknown_axis_is_rejected() -> None:
    fixture = MovingHead(FixtureConfig())

    with pytest.raises(AxisConfigError):
        fixture.set_target("roll", 0.5)
