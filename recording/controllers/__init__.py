"""
Recording Controllers Package

High-level recording controllers that assemble and run the capture command.
"""

from recording.controllers.capture_session import CaptureSession
from recording.controllers.command_builder import CaptureCommandBuilder, format_command

# Public API
__all__ = [
    "CaptureCommandBuilder",
    "CaptureSession",
    "format_command",
]
