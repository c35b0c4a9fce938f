"""
Recording Models Package

Exposes capture request data structures.
"""

from recording.models.capture_request import CaptureOptions, CaptureSelection

__all__ = [
    "CaptureOptions",
    "CaptureSelection",
]
