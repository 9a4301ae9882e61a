"""
Target Sequencer: delayed per-axis target steps for a moving head.

Steps are consumed strictly in order. Only the head of the queue counts
down, so each step's delay is measured from when the previous one fired.
At most one step fires per tick.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

import structlog

from stage_motion.core.exceptions import SequenceError
from stage_motion.fixture.moving_head import AXES, MovingHead

logger = structlog.get_logger()


@dataclass
class SequenceStep:
    """One queued target change."""

    delay: float  # seconds remaining until applied
    axis: str  # "pan" or "tilt"
    target: float  # 0..1


class TargetSequencer:
    """Feeds queued targets into a fixture as time elapses."""

    def __init__(self, fixture: MovingHead):
        self.fixture = fixture
        self._steps: Deque[SequenceStep] = deque()

    def __len__(self) -> int:
        return len(self._steps)

    def push(self, delay: float, axis: str, target: float) -> SequenceStep:
        if delay < 0:
            raise SequenceError(f"delay must be non-negative, got {delay}")
        if axis not in AXES:
            raise SequenceError(f"unknown axis '{axis}'")
        step = SequenceStep(delay=delay, axis=axis, target=min(1.0, max(0.0, target)))
        self._steps.append(step)
        return step

    def clear(self) -> None:
        self._steps.clear()

    def advance(self, dt: float) -> Optional[SequenceStep]:
        """Count down the head step; apply and return it once due."""
        if not self._steps:
            return None

        step = self._steps[0]
        if step.delay > dt:
            step.delay -= dt
            return None

        self._steps.popleft()
        self.fixture.set_target(step.axis, step.target)
        logger.debug("Sequence step applied", axis=step.axis, target=step.target)
        return step
