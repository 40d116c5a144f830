"""Single-frame capture from a local webcam."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Optional

import cv2
import numpy as np

from services.errors import EstimatorUnavailable
from settings import Settings, get_settings

logger = logging.getLogger(__name__)

FRAME_WIDTH = 640
FRAME_HEIGHT = 480
FRAME_RATE = 30


class WebcamCapture:
    """Open the camera, let auto-exposure settle, and grab one RGB frame.

    Warm-up reads are strictly sequential with a fixed delay between them.
    The device is released whether or not the capture succeeds.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        device_factory: Callable[[int], Any] = cv2.VideoCapture,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._settings = settings or get_settings()
        self._device_factory = device_factory
        self._sleep = sleep

    def capture(self) -> np.ndarray:
        index = self._settings.camera_index
        device = self._device_factory(index)
        try:
            if not device.isOpened():
                raise EstimatorUnavailable(f"Unable to open camera {index}.")
            self._configure(device)

            for _ in range(self._settings.warmup_frames):
                self._read(device)
                self._sleep(self._settings.warmup_delay)

            frame = self._read(device)
        finally:
            device.release()

        logger.debug("Captured webcam frame", extra={"shape": frame.shape})
        try:
            return cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        except cv2.error as exc:
            raise EstimatorUnavailable(f"Unusable camera frame: {exc}") from exc

    @staticmethod
    def _configure(device: Any) -> None:
        device.set(cv2.CAP_PROP_FOURCC, cv2.VideoWriter_fourcc(*"MJPG"))
        device.set(cv2.CAP_PROP_FRAME_WIDTH, FRAME_WIDTH)
        device.set(cv2.CAP_PROP_FRAME_HEIGHT, FRAME_HEIGHT)
        device.set(cv2.CAP_PROP_FPS, FRAME_RATE)

    @staticmethod
    def _read(device: Any) -> np.ndarray:
        ok, frame = device.read()
        if not ok or frame is None:
            raise EstimatorUnavailable("Failed to read a frame from the camera.")
        return frame
