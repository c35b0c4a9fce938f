"""
Mock Capture Runner

Records capture commands instead of running ffmpeg.
Mimics FFmpegCapture for unit tests, and lets SCREENCAST_CAPTURE_MODE=mock
walk through a whole session without recording anything.

This is a "Fake" (test double) - it has working logic but no real process.
"""

import logging
from typing import Optional, Sequence

from core.errors import ToolNotFoundError
from recording.interfaces.capture_runner_interface import CaptureRunnerInterface

DEFAULT_MOCK_FORMATS = {"x11grab", "alsa", "v4l2", "avfoundation"}


class MockCapture(CaptureRunnerInterface):
    """
    Mock capture runner for testing.

    Usage:
        capture = MockCapture(returncode=0)
        capture.run(["ffmpeg", "-i", "x", "out.mkv"])
        assert capture.get_last_command()[-1] == "out.mkv"
    """

    def __init__(
        self,
        returncode: int = 0,
        available: bool = True,
        input_formats: Optional[set[str]] = None,
    ):
        """
        Initialize mock capture.

        Args:
            returncode: Exit code every run() reports
            available: Whether ffmpeg pretends to be installed
            input_formats: Formats reported by get_input_formats()
        """
        self.logger = logging.getLogger(__name__)
        self.returncode = returncode
        self.available = available
        self.input_formats = (
            set(input_formats) if input_formats is not None else set(DEFAULT_MOCK_FORMATS)
        )

        # Test helpers
        self.commands: list[list[str]] = []

        self.logger.info(f"Mock Capture initialized (returncode: {returncode})")

    def run(self, command: Sequence[str]) -> int:
        if not self.available:
            raise ToolNotFoundError(command[0])
        self.commands.append(list(command))
        self.logger.info(f"[MOCK] Would run: {' '.join(command)}")
        return self.returncode

    def is_available(self) -> bool:
        return self.available

    def get_input_formats(self) -> set[str]:
        if not self.available:
            return set()
        return set(self.input_formats)

    # =========================================================================
    # TEST HELPER METHODS
    # =========================================================================

    def get_last_command(self) -> Optional[list[str]]:
        """Get the most recent command, or None if nothing ran"""
        return self.commands[-1] if self.commands else None

    def get_run_count(self) -> int:
        return len(self.commands)
