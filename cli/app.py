from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import typer
from dotenv import load_dotenv

from cli.config import load_config
from cli.render import echo_heading, render_report
from display.xrandr import XrandrDisplay
from logging_config import configure_logging
from services.controller import build_default_controller
from services.errors import DisplayControlError

app = typer.Typer(
    help="Adapt monitor brightness and color temperature to ambient light.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main() -> None:
    """Entry point for the CLI."""
    load_dotenv()
    configure_logging()


@app.command("run")
def run_command(
    ctx: typer.Context,
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        help="OpenWeather API key (required only if the webcam is not available).",
    ),
    min_brightness: Optional[float] = typer.Option(
        None,
        "--min-brightness",
        min=0.0,
        max=1.0,
        help="Minimum brightness level (0.0 to 1.0).",
    ),
    day_temp: Optional[float] = typer.Option(
        None, "--day-temp", min=1000.0, help="Color temperature during the day (Kelvin)."
    ),
    night_temp: Optional[float] = typer.Option(
        None, "--night-temp", min=1000.0, help="Color temperature during the night (Kelvin)."
    ),
    transition_hours: Optional[float] = typer.Option(
        None,
        "--transition-hours",
        min=0.0,
        help="Hours before 18:00 over which the temperature ramps down.",
    ),
    monitors: Optional[str] = typer.Option(
        None,
        "--monitors",
        help='Comma-separated monitor names (e.g. "DP-0,HDMI-0"). Detected when omitted.',
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run/--apply",
        help="Compute and print the settings without calling xrandr.",
    ),
) -> None:
    """Estimate ambient light once and apply brightness and gamma to every monitor."""
    config = load_config(
        api_key=api_key,
        min_brightness=min_brightness,
        day_temp=day_temp,
        night_temp=night_temp,
        transition_hours=transition_hours,
        monitors=monitors,
    )
    controller = build_default_controller(
        api_key=config.api_key,
        min_brightness=config.min_brightness,
        schedule=config.schedule,
        monitors=config.monitors,
    )
    ctx.call_on_close(controller.close)

    try:
        report = controller.run(datetime.now(timezone.utc), dry_run=dry_run)
    except DisplayControlError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    render_report(report)


@app.command("monitors")
def monitors_command() -> None:
    """List the monitors xrandr reports."""
    try:
        names = XrandrDisplay().list_monitors()
    except DisplayControlError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    echo_heading("Monitors")
    if not names:
        typer.echo("No monitors detected.")
        return
    for name in names:
        typer.echo(f"  - {name}")
