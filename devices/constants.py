"""
Device Constants

Enums, tool commands and text markers used to discover capture devices.

Why separate constants?
- Listing commands are easy to find and adjust
- Parsers and listers share the same markers
- Single source of truth
"""

from enum import Enum


class DeviceKind(Enum):
    """
    Kinds of capture source.

    The value doubles as the word used in listings and prompts.
    """

    SCREEN = "screen"
    AUDIO = "audio"
    CAMERA = "camera"

    @property
    def title(self) -> str:
        """Heading used when listing devices of this kind"""
        return DEVICE_TITLES[self]

    @property
    def flag(self) -> str:
        """Command-line flag selecting this kind (e.g. -s)"""
        return f"-{self.value[0]}"


DEVICE_TITLES = {
    DeviceKind.SCREEN: "Screens",
    DeviceKind.AUDIO: "Microphones",
    DeviceKind.CAMERA: "Cameras",
}


# =============================================================================
# LINUX LISTING TOOLS
# =============================================================================

# Active monitors with geometry, preferred for multi-monitor setups
XRANDR_COMMAND = ["xrandr", "--listactivemonitors"]

# Fallback: one entry per X screen with its dimensions
XDPYINFO_COMMAND = ["xdpyinfo"]

# ALSA capture hardware
ARECORD_COMMAND = ["arecord", "-l"]

# Video4Linux devices grouped by card
V4L2_COMMAND = ["v4l2-ctl", "--list-devices"]


# =============================================================================
# MACOS LISTING
# =============================================================================

# ffmpeg prints the device list on stderr and exits with an error
# because the empty input cannot be opened
def avfoundation_list_command(ffmpeg: str = "ffmpeg") -> list[str]:
    """Build the ffmpeg invocation that lists avfoundation devices"""
    return [ffmpeg, "-hide_banner", "-f", "avfoundation", "-list_devices", "true", "-i", ""]


AVFOUNDATION_VIDEO_MARKER = "AVFoundation video devices"
AVFOUNDATION_AUDIO_MARKER = "AVFoundation audio devices"

# Video devices whose name starts with this are screens, the rest are cameras
AVFOUNDATION_SCREEN_PREFIX = "Capture screen"


# =============================================================================
# FFMPEG INPUT FORMATS
# =============================================================================

LINUX_INPUT_FORMATS = {
    DeviceKind.SCREEN: "x11grab",
    DeviceKind.AUDIO: "alsa",
    DeviceKind.CAMERA: "v4l2",
}

DARWIN_INPUT_FORMAT = "avfoundation"
