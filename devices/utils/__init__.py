"""
Device Utilities Package

Exposes tool output parsers.
"""

from devices.utils.parsers import (
    display_base,
    parse_arecord_devices,
    parse_avfoundation_devices,
    parse_v4l2_devices,
    parse_xdpyinfo_screens,
    parse_xrandr_monitors,
)

__all__ = [
    "display_base",
    "parse_arecord_devices",
    "parse_avfoundation_devices",
    "parse_v4l2_devices",
    "parse_xdpyinfo_screens",
    "parse_xrandr_monitors",
]
