"""
Custom Exceptions for Stage Motion.

The numeric controller core never raises: degenerate inputs are clamped.
These exceptions cover the outer layers (configuration, fixture patching,
target sequencing) so callers can handle them selectively.
"""

from __future__ import annotations


class MotionError(Exception):
    """Base exception for all Stage Motion errors."""

    def __init__(self, message: str, recoverable: bool = True):
        super().__init__(message)
        self.message = message
        self.recoverable = recoverable


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(MotionError):
    """Base exception for configuration errors."""
    pass


class AxisConfigError(ConfigError):
    """Invalid axis name or angle range."""

    def __init__(self, axis: str, reason: str):
        super().__init__(f"Axis config error '{axis}': {reason}", recoverable=False)
        self.axis = axis
        self.reason = reason


class FixtureProfileError(ConfigError):
    """Fixture patch does not fit in a DMX universe."""

    def __init__(self, fixture: str, reason: str):
        super().__init__(f"Fixture profile error '{fixture}': {reason}", recoverable=False)
        self.fixture = fixture
        self.reason = reason


# =============================================================================
# Sequencer Errors
# =============================================================================


class SequenceError(MotionError):
    """Malformed target sequence step."""

    def __init__(self, reason: str):
        super().__init__(f"Sequence error: {reason}")
        self.reason = reason
