"""
Moving Head Fixture: two independent axis controllers plus a DMX patch.

The fixture owns its pan and tilt controllers directly. Each tick it
advances both axes and can render its current pose into DMX channel
values for a downstream encoder.
"""

from __future__ import annotations

from typing import Dict, TypedDict

import structlog

from stage_motion.core.config import FixtureConfig
from stage_motion.core.exceptions import AxisConfigError, FixtureProfileError
from stage_motion.dmx.universe import (
    DMX_VALUE_MAX,
    fraction_to_dmx_byte,
    is_valid_dmx_channel,
)
from stage_motion.motion.controller import AxisController

logger = structlog.get_logger()

AXES = ("pan", "tilt")


class FixtureCommand(TypedDict):
    """Command to update a specific fixture's DMX channels."""

    fixture_id: str
    fixture_type: str
    channel_values: dict[int, int]  # 1-based channel -> value (0-255)


class MovingHead:
    """A pan/tilt moving head driven by two motion-profile controllers."""

    def __init__(self, config: FixtureConfig):
        self.config = config
        self._validate_patch()

        self.pan = AxisController.from_config(config.pan, name="pan")
        self.tilt = AxisController.from_config(config.tilt, name="tilt")

    def _validate_patch(self) -> None:
        patch = self.config.patch
        channels = {
            "pan_channel": patch.pan_channel,
            "tilt_channel": patch.tilt_channel,
            "dimmer_channel": patch.dimmer_channel,
            "rgbw_start": patch.rgbw_start,
            "rgbw_end": patch.rgbw_start + 3,
        }
        for label, channel in channels.items():
            if not is_valid_dmx_channel(channel):
                raise FixtureProfileError(
                    self.config.id,
                    f"{label}={channel} outside DMX range 1-512",
                )

    def axis(self, name: str) -> AxisController:
        if name == "pan":
            return self.pan
        if name == "tilt":
            return self.tilt
        raise AxisConfigError(name, "unknown axis, expected 'pan' or 'tilt'")

    def set_target(self, axis: str, fraction: float) -> None:
        self.axis(axis).set_target(fraction)

    def step(self, dt: float) -> tuple[float, float]:
        """Advance both axes by ``dt`` and return (pan_deg, tilt_deg)."""
        return self.pan.step(dt), self.tilt.step(dt)

    @property
    def arrived(self) -> bool:
        return self.pan.arrived and self.tilt.arrived

    def dmx_command(self) -> FixtureCommand:
        """Render the current pose and color into DMX channel values."""
        patch = self.config.patch
        red, green, blue = self.config.color_rgb
        values: Dict[int, int] = {
            patch.pan_channel: fraction_to_dmx_byte(self.pan.fraction),
            patch.tilt_channel: fraction_to_dmx_byte(self.tilt.fraction),
            patch.dimmer_channel: DMX_VALUE_MAX,
            patch.rgbw_start: fraction_to_dmx_byte(red),
            patch.rgbw_start + 1: fraction_to_dmx_byte(green),
            patch.rgbw_start + 2: fraction_to_dmx_byte(blue),
            patch.rgbw_start + 3: 0,  # W unused
        }
        return FixtureCommand(
            fixture_id=self.config.id,
            fixture_type="moving_head",
            channel_values=values,
        )

    def write_universe(self, universe: bytearray) -> bytearray:
        """Write this fixture's channel values into a start-code universe buffer."""
        for channel, value in self.dmx_command()["channel_values"].items():
            universe[channel] = value
        return universe
