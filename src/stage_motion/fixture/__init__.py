"""Fixtures that own axis controllers."""

from stage_motion.fixture.moving_head import FixtureCommand, MovingHead
from stage_motion.fixture.sequencer import SequenceStep, TargetSequencer

__all__ = ["FixtureCommand", "MovingHead", "SequenceStep", "TargetSequencer"]
