"""
Recording Interfaces Package

Exposes abstract interfaces for recording components.
"""

from recording.interfaces.capture_runner_interface import CaptureRunnerInterface

# Public API
__all__ = [
    "CaptureRunnerInterface",
]
