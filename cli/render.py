from __future__ import annotations

from typing import Any, Iterable

import typer

from services.controller import RunReport


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_report(report: RunReport) -> None:
    echo_heading("Display Settings")
    echo_key_values(
        [
            ("source", report.reading.source),
            ("brightness", f"{report.reading.value:.3f}"),
            ("temperature_k", f"{report.temperature_k:.0f}"),
            ("gamma", report.gamma.as_xrandr()),
        ]
    )

    typer.echo()
    echo_heading("Monitors")
    if not report.applied:
        for plan in report.plans:
            typer.echo(f"  - {plan.monitor}: planned (dry run)")
        return

    for outcome in report.outcomes:
        if outcome.ok:
            typer.echo(f"  - {outcome.monitor}: applied")
        else:
            typer.secho(f"  - {outcome.monitor}: failed ({outcome.reason})", fg=typer.colors.RED)
