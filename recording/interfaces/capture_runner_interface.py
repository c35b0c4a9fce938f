"""
Capture Runner Interface

Abstract interface for executing the assembled capture command.

Why an interface?
1. Testability: MockCapture records commands instead of running ffmpeg
2. Clear contract: Documents exactly what executing a capture means
"""

from abc import ABC, abstractmethod
from typing import Sequence


class CaptureRunnerInterface(ABC):
    """
    Abstract base class for capture command runners.
    """

    @abstractmethod
    def run(self, command: Sequence[str]) -> int:
        """
        Execute a capture command and wait for it to finish.

        This is BLOCKING: the recording lasts until ffmpeg exits (the user
        presses q or Ctrl+C). No timeout, no supervision.

        Args:
            command: Full ffmpeg command line as argument list

        Returns:
            Exit code of the capture process

        Raises:
            ToolNotFoundError: ffmpeg binary missing
            CaptureError: Process could not be started
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the capture program is installed.

        Returns:
            True if commands can be executed, False otherwise
        """
        pass

    @abstractmethod
    def get_input_formats(self) -> set[str]:
        """
        Input device formats the capture program supports.

        Returns:
            Format names such as {"x11grab", "alsa", "v4l2"}; empty when
            the program is missing
        """
        pass
