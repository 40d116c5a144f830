"""Error kinds raised while estimating brightness and driving displays."""

from __future__ import annotations


class DisplayControlError(Exception):
    """Base class for failures surfaced to the command line."""


class EstimatorUnavailable(DisplayControlError):
    """An ambient light source could not produce a reading."""


class MissingCredential(DisplayControlError):
    """The weather fallback was needed but no API key is configured."""


class NetworkFailure(DisplayControlError):
    """A location or weather request failed in transport or returned an error status."""


class ParseFailure(DisplayControlError):
    """A location or weather response could not be decoded."""


class NoMonitorsFound(DisplayControlError):
    """No explicit monitors were configured and enumeration found none."""


class ApplyFailure(DisplayControlError):
    """Setting brightness or gamma on a single monitor failed."""

    def __init__(self, monitor: str, reason: str) -> None:
        super().__init__(f"Failed to set brightness/gamma for {monitor}: {reason}")
        self.monitor = monitor
        self.reason = reason
