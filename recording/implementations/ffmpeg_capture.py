"""
FFmpeg Capture Runner

Executes the assembled capture command with ffmpeg as a child process.

The child shares our terminal: ffmpeg's progress goes straight to the
user, and pressing q or Ctrl+C reaches ffmpeg directly.
"""

import logging
import shutil
import subprocess
from typing import Sequence

from config.settings import FFMPEG_BINARY, TOOL_INSTALL_HINTS
from core.errors import CaptureError, ToolNotFoundError
from core.platform import run_tool
from recording.constants import FFMPEG_DEVICES_ARGS
from recording.interfaces.capture_runner_interface import CaptureRunnerInterface
from recording.utils.recording_utils import parse_ffmpeg_input_formats


class FFmpegCapture(CaptureRunnerInterface):
    """
    Capture runner using the ffmpeg binary.

    Usage:
        capture = FFmpegCapture()
        exit_code = capture.run(command)
    """

    def __init__(self, ffmpeg: str = FFMPEG_BINARY):
        """
        Initialize FFmpeg capture.

        Args:
            ffmpeg: ffmpeg binary name or path
        """
        self.logger = logging.getLogger(__name__)
        self.ffmpeg = ffmpeg

    def run(self, command: Sequence[str]) -> int:
        """
        Run ffmpeg and wait for it to exit.

        Ctrl+C in the terminal is delivered to ffmpeg as well as to us.
        ffmpeg then finalizes the output file, so we keep waiting instead
        of killing it.
        """
        if not shutil.which(command[0]):
            raise ToolNotFoundError(command[0], TOOL_INSTALL_HINTS["ffmpeg"])

        self.logger.info(f"Starting capture: {command[-1]}")

        try:
            # stdin/stdout/stderr inherited: ffmpeg reads 'q' from the terminal
            process = subprocess.Popen(list(command))
        except FileNotFoundError:
            raise ToolNotFoundError(command[0], TOOL_INSTALL_HINTS["ffmpeg"])
        except OSError as e:
            raise CaptureError(f"Failed to start {command[0]}: {e}") from e

        try:
            returncode = process.wait()
        except KeyboardInterrupt:
            self.logger.info("Interrupted, waiting for ffmpeg to finalize the file")
            returncode = process.wait()

        if returncode != 0:
            self.logger.warning(f"ffmpeg exited with code {returncode}")
        else:
            self.logger.info("Capture finished")

        return returncode

    def is_available(self) -> bool:
        """Check if ffmpeg is installed"""
        if not shutil.which(self.ffmpeg):
            self.logger.warning(f"{self.ffmpeg} not found in PATH")
            return False
        return True

    def get_input_formats(self) -> set[str]:
        """Ask ffmpeg which input devices it was built with"""
        if not self.is_available():
            return set()
        output = run_tool([self.ffmpeg, *FFMPEG_DEVICES_ARGS])
        return parse_ffmpeg_input_formats(output.stdout)
