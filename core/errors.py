"""
Screencast Exceptions

One hierarchy for every failure the tool can detect.

Errors are raised where they are detected and only turned into a
diagnostic plus exit code at the CLI boundary (cli/main.py).
There is no retry logic anywhere: a missing tool or device is reported
and the program exits.
"""


class ScreencastError(Exception):
    """
    Base exception for all screencast errors.

    Examples:
    - ffmpeg not installed
    - Requested camera index does not exist
    - Config file is not valid YAML
    """
    pass


class ConfigError(ScreencastError):
    """User config file is malformed or holds invalid values"""
    pass


class UnsupportedPlatformError(ScreencastError):
    """Running on an OS other than Linux or macOS"""
    pass


class ToolNotFoundError(ScreencastError):
    """External tool (ffmpeg, xrandr, arecord, ...) is not installed"""

    def __init__(self, tool: str, hint: str = ""):
        self.tool = tool
        self.hint = hint
        message = f"Required tool not found: {tool}"
        if hint:
            message = f"{message}. {hint}"
        super().__init__(message)


class DeviceError(ScreencastError):
    """Device enumeration failed"""
    pass


class DeviceNotFoundError(DeviceError):
    """Requested device index does not exist"""
    pass


class SelectionAbortedError(ScreencastError):
    """User closed stdin while being asked to choose a device"""
    pass


class CaptureError(ScreencastError):
    """Capture command could not be built or started"""
    pass


class NothingToRecordError(CaptureError):
    """No screen, audio or camera source was selected"""
    pass


class OutputPathError(CaptureError):
    """Output directory cannot be created or written"""
    pass
