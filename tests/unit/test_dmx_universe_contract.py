from __future__ import annotations

from stage_motion.dmx.universe import (
    DMX_CHANNEL_COUNT,
    DMX_START_CODE,
    DMX_START_CODE_INDEX,
    DMX_UNIVERSE_SIZE,
    create_universe_buffer,
    extract_channel_payload,
    fraction_to_dmx_byte,
    is_valid_dmx_channel,
)


def test_create_universe_buffer_contract() -> None:
    universe = create_universe_buffer()
    assert len(universe) == DMX_UNIVERSE_SIZE
    assert universe[DMX_START_CODE_INDEX] == DMX_START_CODE


def test_extract_channel_payload_contract() -> None:
    universe = create_universe_buffer()
    universe[1] = 11
    universe[512] = 99

    payload = extract_channel_payload(bytes(universe))
    assert len(payload) == DMX_CHANNEL_COUNT
    assert payload[0] == 11
    assert payload[-1] == 99


def test_channel_range_is_one_based() -> None:
    assert is_valid_dmx_channel(1)
    assert is_valid_dmx_channel(512)
    assert not is_valid_dmx_channel(0)
    assert not is_valid_dmx_channel(513)


def test_fraction_to_dmx_byte_clamps_and_rounds() -> None:
    assert fraction_to_dmx_byte(0.0) == 0
    assert fraction_to_dmx_byte(1.0) == 255
    assert fraction_to_dmx_byte(0.2) == 51
    assert fraction_to_dmx_byte(0.5) == 128
    assert fraction_to_dmx_byte(-0.5) == 0
    assert fraction_to_dmx_byte(1.7) == 255
