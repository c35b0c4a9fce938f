"""
Recording Module

Assembles and executes the ffmpeg capture command.

Public API:
    - CaptureCommandBuilder: Builds the ffmpeg command line
    - CaptureSession: Dry run or execute a capture
    - CaptureSelection / CaptureOptions: What and how to record
    - RecordingFactory: Capture runner creation
    - CaptureRunnerInterface: Runner contract
    - CameraPosition: Camera overlay corner
    - format_command / generate_filename: Helpers

Usage:
    from recording import CaptureCommandBuilder, CaptureSession, RecordingFactory

    session = CaptureSession(
        CaptureCommandBuilder(platform),
        RecordingFactory.create_capture(),
    )
    session.record(selection, options)
"""

from recording.constants import CameraPosition
from recording.controllers.capture_session import CaptureSession
from recording.controllers.command_builder import CaptureCommandBuilder, format_command
from recording.factory import RecordingFactory
from recording.interfaces.capture_runner_interface import CaptureRunnerInterface
from recording.models.capture_request import CaptureOptions, CaptureSelection
from recording.utils.recording_utils import generate_filename

__all__ = [
    "CameraPosition",
    "CaptureCommandBuilder",
    "CaptureOptions",
    "CaptureRunnerInterface",
    "CaptureSelection",
    "CaptureSession",
    "RecordingFactory",
    "format_command",
    "generate_filename",
]
