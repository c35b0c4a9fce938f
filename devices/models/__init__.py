"""
Device Models Package

Exposes device data structures.
"""

from devices.models.capture_device import CaptureDevice, ScreenGeometry

__all__ = [
    "CaptureDevice",
    "ScreenGeometry",
]
