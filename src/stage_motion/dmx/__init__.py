"""DMX buffer helpers for handing axis output to a fixture encoder."""

from stage_motion.dmx.universe import (
    DMX_CHANNEL_COUNT,
    DMX_CHANNEL_MAX,
    DMX_CHANNEL_MIN,
    DMX_UNIVERSE_SIZE,
    create_universe_buffer,
    extract_channel_payload,
    fraction_to_dmx_byte,
    is_valid_dmx_channel,
)

__all__ = [
    "DMX_CHANNEL_COUNT",
    "DMX_CHANNEL_MIN",
    "DMX_CHANNEL_MAX",
    "DMX_UNIVERSE_SIZE",
    "create_universe_buffer",
    "extract_channel_payload",
    "fraction_to_dmx_byte",
    "is_valid_dmx_channel",
]
