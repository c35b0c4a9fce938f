"""
Recording Factory

Factory pattern for creating capture runners.
Single place to decide between running ffmpeg and recording commands.
"""

import logging
from typing import Literal

from config.settings import FFMPEG_BINARY, TOOL_INSTALL_HINTS
from core.errors import ToolNotFoundError
from recording.implementations.ffmpeg_capture import FFmpegCapture
from recording.implementations.mock_capture import MockCapture
from recording.interfaces.capture_runner_interface import CaptureRunnerInterface

# Type alias for better type hints
CaptureMode = Literal["auto", "real", "mock"]


class RecordingFactory:
    """
    Factory for creating capture runners.

    "auto" always returns the ffmpeg runner: silently switching to the mock
    would leave the user without a recording. A missing ffmpeg is logged
    here and raised when the capture actually runs.

    Usage:
        capture = RecordingFactory.create_capture()
        capture = RecordingFactory.create_capture(mode="mock")
        capture = RecordingFactory.create_capture(mode="real")  # raises if missing
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_capture(
        cls,
        mode: CaptureMode = "auto",
        ffmpeg: str = FFMPEG_BINARY,
    ) -> CaptureRunnerInterface:
        """
        Create a capture runner.

        Args:
            mode: "auto", "real" (ffmpeg must be installed), "mock"
            ffmpeg: ffmpeg binary name or path

        Returns:
            CaptureRunnerInterface implementation

        Raises:
            ToolNotFoundError: mode="real" but ffmpeg not installed
        """
        if mode == "mock":
            cls._logger.info("Creating Mock Capture (forced)")
            return MockCapture()

        capture = FFmpegCapture(ffmpeg=ffmpeg)
        if not capture.is_available():
            if mode == "real":
                raise ToolNotFoundError(ffmpeg, TOOL_INSTALL_HINTS["ffmpeg"])
            cls._logger.warning(f"{ffmpeg} not available, recording will fail")

        cls._logger.info(f"Creating FFmpeg Capture ({mode})")
        return capture
