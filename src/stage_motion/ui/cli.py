"""
Command-Line Interface for Stage Motion.

Provides commands for simulating an axis move tick by tick and for
previewing the motion profile of an axis tuning.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click
import structlog

from stage_motion import __version__


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: Optional[str]) -> None:
    """
    Stage Motion - pan/tilt motion-profile control for moving heads

    Simulates jerk-limited trapezoid and constant-speed moves for the pan
    and tilt axes of a moving-head fixture.
    """
    ctx.ensure_object(dict)

    # Configure logging
    log_level = "DEBUG" if debug else "INFO"
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level)
        ),
    )

    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config) if config else None


def _load_settings(ctx: click.Context):
    from stage_motion.core.config import load_settings

    settings = load_settings(ctx.obj["config_path"])
    settings.debug = ctx.obj["debug"]
    return settings


@cli.command()
@click.option("--axis", type=click.Choice(["pan", "tilt"]), default="pan", help="Axis to move")
@click.option("--from", "start", default=0.0, help="Start position (0..1)")
@click.option("--to", "end", default=1.0, help="Target position (0..1)")
@click.option("--dt", default=None, type=float, help="Tick length in seconds")
@click.option("--max-ticks", default=None, type=int, help="Give up after this many ticks")
@click.option("--every", default=10, help="Print every Nth tick")
@click.pass_context
def simulate(
    ctx: click.Context,
    axis: str,
    start: float,
    end: float,
    dt: Optional[float],
    max_ticks: Optional[int],
    every: int,
) -> None:
    """Simulate a single-axis move and print the trajectory."""
    from stage_motion.fixture.moving_head import MovingHead

    try:
        settings = _load_settings(ctx)
        fixture = MovingHead(settings.fixture)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        if ctx.obj["debug"]:
            raise
        sys.exit(1)

    dt = dt if dt is not None else settings.simulation.dt
    max_ticks = max_ticks if max_ticks is not None else settings.simulation.max_ticks
    if dt <= 0:
        click.echo("Error: --dt must be positive", err=True)
        sys.exit(1)

    controller = fixture.axis(axis)
    controller.reset(controller.range.to_degrees(start))
    controller.set_target(end)

    click.echo(f"Stage Motion v{__version__}")
    click.echo("=" * 50)
    click.echo(
        f"Axis: {axis}  {controller.angle:.2f} -> {controller.target:.2f} deg  dt={dt:.5f}s"
    )
    click.echo()

    for tick in range(1, max_ticks + 1):
        angle = controller.step(dt)
        if controller.arrived or tick % max(1, every) == 0:
            click.echo(
                f"{tick:6d}  t={tick * dt:7.3f}s  "
                f"mode={controller.mode.value:12s}  "
                f"angle={angle:9.3f}  vel={controller.state.velocity:8.2f}"
            )
        if controller.arrived:
            click.echo()
            click.echo(f"Arrived after {tick} ticks ({tick * dt:.3f}s)")
            return

    click.echo(f"Error: no arrival within {max_ticks} ticks", err=True)
    sys.exit(1)


@cli.command()
@click.option("--axis", type=click.Choice(["pan", "tilt"]), default="pan", help="Axis to preview")
@click.option("--dt", default=None, type=float, help="Sample interval in seconds")
@click.pass_context
def preview(ctx: click.Context, axis: str, dt: Optional[float]) -> None:
    """Preview the 0 -> full-range profile of an axis tuning."""
    from stage_motion.core.config import axis_config
    from stage_motion.motion.preview import preview_profile

    try:
        settings = _load_settings(ctx)
        config = axis_config(settings.fixture, axis)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        if ctx.obj["debug"]:
            raise
        sys.exit(1)

    dt = dt if dt is not None else settings.simulation.preview_dt
    target = max(1.0, abs(config.range.span))
    result = preview_profile(
        config.params,
        target,
        dt=dt,
        max_duration_s=settings.simulation.preview_max_s,
    )

    click.echo(f"Profile preview: {axis} 0 -> {target:.1f} deg")
    click.echo("-" * 50)
    click.echo(f"  Samples:           {len(result)}")
    click.echo(f"  Duration:          {result.duration:.3f} s")
    click.echo(f"  Peak velocity:     {result.peak_velocity:.2f} deg/s")
    click.echo(f"  Peak acceleration: {result.peak_acceleration:.2f} deg/s^2")
    click.echo(f"  Arrived:           {'yes' if result.arrived else 'no'}")


def main() -> None:
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
