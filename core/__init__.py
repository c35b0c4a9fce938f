"""
Core utilities and modules.

Public API:
    - Platform / detect_platform: Which capture backend applies
    - find_tool / require_tool / run_tool: External tool helpers
    - ScreencastError and subclasses: Failure hierarchy

Usage:
    from core.platform import detect_platform, require_tool

    platform = detect_platform()
    require_tool("ffmpeg")
"""

from core.errors import (
    CaptureError,
    ConfigError,
    DeviceError,
    DeviceNotFoundError,
    NothingToRecordError,
    OutputPathError,
    ScreencastError,
    SelectionAbortedError,
    ToolNotFoundError,
    UnsupportedPlatformError,
)
from core.platform import (
    Platform,
    ToolOutput,
    detect_platform,
    find_tool,
    require_tool,
    run_tool,
)

__all__ = [
    "CaptureError",
    "ConfigError",
    "DeviceError",
    "DeviceNotFoundError",
    "NothingToRecordError",
    "OutputPathError",
    "Platform",
    "ScreencastError",
    "SelectionAbortedError",
    "ToolNotFoundError",
    "ToolOutput",
    "UnsupportedPlatformError",
    "detect_platform",
    "find_tool",
    "require_tool",
    "run_tool",
]
