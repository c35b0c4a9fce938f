"""
Capture Session

Runs one capture: builds the command, then either prints it (dry run) or
checks the output location and executes it.

This is the high-level controller the CLI uses.

SOLID Principles:
- Single Responsibility: Only turns a selection into an executed command
- Dependency Inversion: Depends on CaptureRunnerInterface
"""

import logging

from core.errors import OutputPathError
from recording.controllers.command_builder import CaptureCommandBuilder, format_command
from recording.interfaces.capture_runner_interface import CaptureRunnerInterface
from recording.models.capture_request import CaptureOptions, CaptureSelection
from recording.utils.recording_utils import validate_output_path


class CaptureSession:
    """
    Manages a single capture.

    Usage:
        session = CaptureSession(CaptureCommandBuilder(Platform.LINUX), capture)

        print(session.dry_run(selection, options))   # show command only
        exit_code = session.record(selection, options)  # blocks until done
    """

    def __init__(self, builder: CaptureCommandBuilder, capture: CaptureRunnerInterface):
        """
        Args:
            builder: Command builder for this platform
            capture: Runner executing the command
        """
        self.logger = logging.getLogger(__name__)
        self.builder = builder
        self.capture = capture

    def dry_run(self, selection: CaptureSelection, options: CaptureOptions) -> str:
        """
        Build the command without executing it.

        Returns:
            Shell-quoted command line
        """
        command = self.builder.build(selection, options)
        return format_command(command)

    def record(self, selection: CaptureSelection, options: CaptureOptions) -> int:
        """
        Build and execute the command, blocking until ffmpeg exits.

        Returns:
            ffmpeg exit code

        Raises:
            NothingToRecordError: Empty selection
            OutputPathError: Output location unusable
            ToolNotFoundError: ffmpeg missing
        """
        command = self.builder.build(selection, options)

        valid, error = validate_output_path(options.output_file)
        if not valid:
            raise OutputPathError(error)

        sources = ", ".join(device.label for device in selection.devices())
        self.logger.info(f"Recording {sources} to {options.output_file}")
        self.logger.debug(f"Command: {format_command(command)}")

        return self.capture.run(command)
