"""Combine brightness and color temperature into per-monitor commands."""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from models.records import MonitorPlan
from services.errors import NoMonitorsFound
from services.gamma import kelvin_to_gamma


class DisplaySink(Protocol):
    def list_monitors(self) -> List[str]:
        ...

    def apply(self, plan: MonitorPlan) -> None:
        ...


def plan_commands(
    brightness: float, temp_k: float, monitors: Sequence[str]
) -> List[MonitorPlan]:
    """Build one plan per monitor, all sharing the same brightness and gamma."""
    gamma = kelvin_to_gamma(temp_k)
    return [MonitorPlan(monitor=name, brightness=brightness, gamma=gamma) for name in monitors]


def resolve_monitors(explicit: Optional[Sequence[str]], sink: DisplaySink) -> List[str]:
    """Prefer the configured monitor list, otherwise ask the sink to enumerate."""
    if explicit:
        return list(explicit)
    monitors = sink.list_monitors()
    if not monitors:
        raise NoMonitorsFound("No monitors detected.")
    return monitors
