"""Monitor enumeration and brightness/gamma application through xrandr."""

from __future__ import annotations

import subprocess
from typing import Callable, List, Optional

from models.records import MonitorPlan
from services.errors import ApplyFailure, NoMonitorsFound
from settings import Settings, get_settings

Runner = Callable[..., subprocess.CompletedProcess]


def parse_monitor_listing(output: str) -> List[str]:
    """Extract monitor names from ``xrandr --listmonitors`` output.

    The first line is the ``Monitors: N`` header. Every following line ends
    with the output name, e.g. ``0: +*DP-0 2560/597x1440/336+0+0  DP-0``.
    """
    monitors: List[str] = []
    for line in output.splitlines()[1:]:
        tokens = line.split()
        if tokens:
            monitors.append(tokens[-1])
    return monitors


class XrandrDisplay:
    """Display sink backed by the ``xrandr`` command line utility."""

    def __init__(self, settings: Optional[Settings] = None, runner: Runner = subprocess.run) -> None:
        self._binary = (settings or get_settings()).xrandr_binary
        self._run = runner

    def list_monitors(self) -> List[str]:
        try:
            result = self._run(
                [self._binary, "--listmonitors"],
                capture_output=True,
                text=True,
                check=False,
            )
        except (OSError, UnicodeDecodeError) as exc:
            raise NoMonitorsFound(f"Failed to execute {self._binary} --listmonitors: {exc}") from exc
        if result.returncode != 0:
            raise NoMonitorsFound(f"Failed to execute {self._binary} --listmonitors.")
        return parse_monitor_listing(result.stdout)

    def apply(self, plan: MonitorPlan) -> None:
        command = [
            self._binary,
            "--output",
            plan.monitor,
            "--brightness",
            f"{plan.brightness:.3f}",
            "--gamma",
            plan.gamma.as_xrandr(),
        ]
        try:
            result = self._run(command, capture_output=True, text=True, check=False)
        except (OSError, UnicodeDecodeError) as exc:
            raise ApplyFailure(plan.monitor, str(exc)) from exc
        if result.returncode != 0:
            detail = (result.stderr or "").strip() or f"exit status {result.returncode}"
            raise ApplyFailure(plan.monitor, detail)
