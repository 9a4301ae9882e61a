from __future__ import annotations

import numpy as np

from stage_motion.core.config import default_pan_axis, default_tilt_axis
from stage_motion.motion.preview import preview_profile


def test_pan_preview_reaches_full_range() -> None:
    params = default_pan_axis().params

    result = preview_profile(params, 540.0)

    assert result.arrived
    assert result.position[-1] == 540.0
    assert result.velocity[-1] == 0.0
    assert result.peak_velocity <= params.v_max + 1e-9
    assert 0.0 < result.duration < 10.0


def test_preview_samples_are_aligned_and_finite() -> None:
    result = preview_profile(default_tilt_axis().params, 180.0)

    lengths = {
        len(result.time),
        len(result.position),
        len(result.velocity),
        len(result.acceleration),
        len(result.jerk),
    }
    assert lengths == {len(result)}
    assert np.all(np.diff(result.time) > 0)
    assert np.all(np.isfinite(result.jerk))
    assert np.all(np.diff(result.position) >= 0)


def test_preview_gives_up_after_max_duration() -> None:
    result = preview_profile(default_pan_axis().params, 540.0, max_duration_s=0.1)

    assert not result.arrived
    assert result.duration <= 0.1 + 1.0 / 240.0
