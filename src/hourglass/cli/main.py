"""CLI entry point for hourglass.

Uses Click to expose the ``hourglass`` command group.  ``run`` is a small
terminal host: it owns a CountdownTimer, drives it with a TickLoop and
redraws the remaining time on a single line.
"""

from __future__ import annotations

import logging
import math
import sys
from datetime import timedelta

import click

import hourglass
from hourglass.core.duration import MAX_DURATION, ZERO, as_duration, format_hms
from hourglass.core.timer import CountdownTimer, TimerState
from hourglass.host.loop import DEFAULT_TICK_INTERVAL, TickLoop
from hourglass.host.preset import InvalidPresetError, parse_preset


def _preset_callback(
    ctx: click.Context, param: click.Parameter, value: str
) -> timedelta:
    """Convert the PRESET argument, turning validation errors into usage errors."""
    try:
        return parse_preset(value)
    except InvalidPresetError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc


def _render(timer: CountdownTimer) -> None:
    click.echo(f"\r{timer.get_state()} {timer.to_display_string()}", nl=False)


@click.group()
@click.version_option(version=hourglass.__version__, prog_name="hourglass")
def cli() -> None:
    """hourglass: a tick-driven countdown timer."""


@cli.command()
@click.argument("preset", callback=_preset_callback)
@click.option(
    "--interval",
    type=click.FloatRange(min=0.0, min_open=True),
    default=DEFAULT_TICK_INTERVAL,
    show_default=True,
    envvar="HOURGLASS_TICK_INTERVAL",
    help="Seconds between ticks.",
)
@click.option("--verbose", is_flag=True, help="Log timer transitions to stderr.")
def run(preset: timedelta, interval: float, verbose: bool) -> None:
    """Count down from PRESET (SS, MM:SS or HH:MM:SS)."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    if preset == ZERO:
        click.echo("Nothing to count down", err=True)
        sys.exit(1)

    timer = CountdownTimer(preset)
    loop = TickLoop(timer, interval=interval)
    timer.start()
    _render(timer)
    try:
        state = loop.run(on_frame=_render)
    except KeyboardInterrupt:
        timer.pause()
        click.echo()
        click.echo(f"Paused at {timer.to_display_string()}")
        sys.exit(130)

    click.echo()
    if state == TimerState.FINISHED:
        click.echo("Finished")


@cli.command(name="format")
@click.argument("seconds", type=click.FloatRange(min=0.0))
def format_command(seconds: float) -> None:
    """Print SECONDS as HH:MM:SS."""
    duration = as_duration(seconds)
    if not math.isfinite(seconds) or duration == MAX_DURATION:
        raise click.BadParameter(
            f"{seconds!r} is not a representable duration",
            ctx=click.get_current_context(),
            param_hint="'SECONDS'",
        )
    click.echo(format_hms(duration))
