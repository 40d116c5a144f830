"""Tests for the xrandr display sink."""

from __future__ import annotations

import subprocess
from dataclasses import replace
from typing import Any, List

import pytest

from display.xrandr import XrandrDisplay, parse_monitor_listing
from models.records import GammaTriple, MonitorPlan
from services.errors import ApplyFailure, NoMonitorsFound
from settings import get_settings

LISTING = """Monitors: 2
 0: +*DP-0 2560/597x1440/336+0+0  DP-0
 1: +HDMI-0 1920/527x1080/296+2560+0  HDMI-0
"""


class FakeRunner:
    def __init__(self, returncode: int = 0, stdout: str = "", stderr: str = "", error: Exception | None = None) -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.error = error
        self.commands: List[List[str]] = []

    def __call__(self, command: List[str], **kwargs: Any) -> subprocess.CompletedProcess:
        self.commands.append(command)
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(command, self.returncode, self.stdout, self.stderr)


def _display(runner: FakeRunner) -> XrandrDisplay:
    return XrandrDisplay(settings=replace(get_settings(), xrandr_binary="xrandr"), runner=runner)


def _plan(monitor: str = "DP-0") -> MonitorPlan:
    return MonitorPlan(monitor=monitor, brightness=0.8, gamma=GammaTriple(1.0, 0.7654, 0.51234))


def test_parse_monitor_listing_skips_header() -> None:
    assert parse_monitor_listing(LISTING) == ["DP-0", "HDMI-0"]


def test_parse_monitor_listing_ignores_blank_lines() -> None:
    assert parse_monitor_listing("Monitors: 0\n\n") == []


def test_list_monitors_invokes_xrandr() -> None:
    runner = FakeRunner(stdout=LISTING)

    assert _display(runner).list_monitors() == ["DP-0", "HDMI-0"]
    assert runner.commands == [["xrandr", "--listmonitors"]]


def test_list_monitors_failure_is_reported() -> None:
    with pytest.raises(NoMonitorsFound):
        _display(FakeRunner(returncode=1)).list_monitors()
    with pytest.raises(NoMonitorsFound):
        _display(FakeRunner(error=FileNotFoundError("xrandr"))).list_monitors()


def test_apply_formats_brightness_and_gamma() -> None:
    runner = FakeRunner()

    _display(runner).apply(_plan())

    assert runner.commands == [
        [
            "xrandr",
            "--output",
            "DP-0",
            "--brightness",
            "0.800",
            "--gamma",
            "1.000:0.765:0.512",
        ]
    ]


def test_apply_nonzero_exit_raises_apply_failure() -> None:
    runner = FakeRunner(returncode=1, stderr="warning: output HDMI-9 not found; ignoring\n")

    with pytest.raises(ApplyFailure) as excinfo:
        _display(runner).apply(_plan("HDMI-9"))

    assert excinfo.value.monitor == "HDMI-9"
    assert "not found" in excinfo.value.reason


def test_apply_os_error_raises_apply_failure() -> None:
    with pytest.raises(ApplyFailure):
        _display(FakeRunner(error=FileNotFoundError("xrandr"))).apply(_plan())


def test_undecodable_output_is_reported() -> None:
    error = UnicodeDecodeError("utf-8", b"\xff\xfe", 0, 1, "invalid start byte")

    with pytest.raises(NoMonitorsFound):
        _display(FakeRunner(error=error)).list_monitors()
    with pytest.raises(ApplyFailure):
        _display(FakeRunner(error=error)).apply(_plan())
