"""
Configuration Management for Stage Motion.

Uses Pydantic Settings for type-safe configuration with environment
variable support and YAML file loading. Per-axis motion tuning lives in
the frozen ``MotionParams`` model.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import yaml

from stage_motion.core.exceptions import AxisConfigError


class MotionParams(BaseModel):
    """Immutable per-axis motion profile tuning."""

    model_config = ConfigDict(frozen=True)

    v_max: float = Field(default=300.0, gt=0)  # deg/s (cruise limit)
    a_max: float = Field(default=800.0, ge=0)  # deg/s^2 (accel and decel)
    j_max: float = Field(default=50_000.0, gt=0)  # deg/s^3
    k_small: float = Field(default=1.5, gt=0)  # (deg/s) per deg of initial delta
    small_thresh: float = Field(default=80.0, ge=0)  # deg
    snap_pos: float = Field(default=0.5, ge=0)  # deg
    snap_vel: float = Field(default=3.0, ge=0)  # deg/s
    reverse_brake_scale: float = Field(default=1.0, gt=0)  # clamped to 0..1 on use


class AngleRange(BaseModel):
    """Caller-side mapping between a 0..1 fraction and degrees."""

    model_config = ConfigDict(frozen=True)

    start_deg: float = 0.0
    end_deg: float = 540.0

    @model_validator(mode="after")
    def _check_span(self) -> "AngleRange":
        if self.start_deg == self.end_deg:
            raise AxisConfigError("range", "start_deg and end_deg must differ")
        return self

    @property
    def span(self) -> float:
        return self.end_deg - self.start_deg

    def to_degrees(self, fraction: float) -> float:
        """Map a fraction to degrees, clamping the fraction to 0..1."""
        return self.start_deg + min(1.0, max(0.0, fraction)) * self.span

    def to_fraction(self, degrees: float) -> float:
        """Renormalize an angle back to 0..1."""
        return (degrees - self.start_deg) / self.span


class AxisConfig(BaseModel):
    """Tuning and range for a single axis."""

    params: MotionParams = Field(default_factory=MotionParams)
    range: AngleRange = Field(default_factory=AngleRange)


def default_pan_axis() -> AxisConfig:
    return AxisConfig(
        params=MotionParams(
            v_max=300.0,
            a_max=800.0,
            j_max=50_000.0,
            k_small=1.5,
            small_thresh=80.0,
            snap_pos=0.5,
            snap_vel=3.0,
            reverse_brake_scale=1.4,
        ),
        range=AngleRange(start_deg=0.0, end_deg=540.0),
    )


def default_tilt_axis() -> AxisConfig:
    return AxisConfig(
        params=MotionParams(
            v_max=320.0,
            a_max=1600.0,
            j_max=70_000.0,
            k_small=5.0,
            small_thresh=15.0,
            snap_pos=0.3,
            snap_vel=2.0,
            reverse_brake_scale=1.25,
        ),
        range=AngleRange(start_deg=0.0, end_deg=180.0),
    )


class DMXPatchConfig(BaseModel):
    """DMX channel patch for a moving head (1-based channels)."""

    pan_channel: int = 82
    tilt_channel: int = 83
    dimmer_channel: int = 85
    rgbw_start: int = 87  # R, G, B, W consecutive


class FixtureConfig(BaseModel):
    """Moving head fixture configuration."""

    id: str = "beam-1"
    name: str = "Beam (Moving Head)"
    pan: AxisConfig = Field(default_factory=default_pan_axis)
    tilt: AxisConfig = Field(default_factory=default_tilt_axis)
    patch: DMXPatchConfig = Field(default_factory=DMXPatchConfig)
    color_rgb: tuple[float, float, float] = (1.0, 1.0, 1.0)


class SimulationConfig(BaseModel):
    """Defaults for the simulation driver and profile preview."""

    dt: float = Field(default=1.0 / 60.0, gt=0)
    preview_dt: float = Field(default=1.0 / 240.0, gt=0)
    preview_max_s: float = Field(default=10.0, gt=0)
    max_ticks: int = Field(default=10_000, gt=0)


class Settings(BaseSettings):
    """
    Main application settings.

    Can be configured via:
    - Environment variables (prefixed with STAGE_MOTION_)
    - YAML config file
    - Direct instantiation
    """

    model_config = SettingsConfigDict(
        env_prefix="STAGE_MOTION_",
        env_nested_delimiter="__",
    )

    fixture: FixtureConfig = Field(default_factory=FixtureConfig)
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)

    # Debug
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: Path) -> None:
        """Save settings to a YAML file."""
        with open(path, "w") as f:
            yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False)


def axis_config(fixture: FixtureConfig, axis: str) -> AxisConfig:
    """Look up an axis block by name ("pan" or "tilt")."""
    if axis == "pan":
        return fixture.pan
    if axis == "tilt":
        return fixture.tilt
    raise AxisConfigError(axis, "unknown axis, expected 'pan' or 'tilt'")


def load_settings(path: Optional[Path]) -> Settings:
    """Load settings from YAML when a path is given, else from the environment."""
    if path is not None:
        return Settings.from_yaml(path)
    return Settings()
