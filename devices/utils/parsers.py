"""
Device Listing Parsers

Pure functions turning the text output of listing tools into
CaptureDevice lists. Kept free of subprocess calls so they can be tested
with captured tool output.
"""

import re

from devices.constants import (
    AVFOUNDATION_AUDIO_MARKER,
    AVFOUNDATION_SCREEN_PREFIX,
    AVFOUNDATION_VIDEO_MARKER,
    DeviceKind,
)
from devices.models.capture_device import CaptureDevice, ScreenGeometry

# " 1: +HDMI-1 2560/597x1440/336+1920+0  HDMI-1"
_XRANDR_MONITOR = re.compile(
    r"^\s*(\d+):\s+\+?\*?(\S+)\s+(\d+)/\d+x(\d+)/\d+\+(-?\d+)\+(-?\d+)",
)

# "screen #0:"
_XDPYINFO_SCREEN = re.compile(r"^screen #(\d+):")

# "  dimensions:    3840x1080 pixels (1016x286 millimeters)"
_XDPYINFO_DIMENSIONS = re.compile(r"^\s*dimensions:\s+(\d+)x(\d+)")

# "card 1: Camera [USB Camera], device 0: USB Audio [USB Audio]"
_ARECORD_DEVICE = re.compile(
    r"^card (\d+): (\S+) \[(.*?)\], device (\d+): (.*?) \[(.*?)\]",
)

# "[AVFoundation indev @ 0x7f9] [1] Capture screen 0"
_AVFOUNDATION_DEVICE = re.compile(r"\]\s*\[(\d+)\]\s+(.+?)\s*$")

# Trailing bus information on v4l2-ctl card lines: "(usb-0000:00:14.0-8)"
_V4L2_BUS_INFO = re.compile(r"\s*\([^()]*\)\s*$")


def display_base(display: str) -> str:
    """
    Strip the screen number from an X11 display name.

    Example:
        display_base(":0.0") -> ":0"
        display_base("localhost:10.0") -> "localhost:10"
    """
    host, _, number = display.rpartition(":")
    return f"{host}:{number.split('.')[0]}"


def parse_xrandr_monitors(output: str, display: str) -> list[CaptureDevice]:
    """
    Parse `xrandr --listactivemonitors`.

    Args:
        output: Tool stdout
        display: X11 display the monitors belong to (e.g. ":0.0")

    Returns:
        One screen device per active monitor, identifier "<display>+x,y"

    Example:
        Monitors: 2
         0: +*eDP-1 1920/344x1080/193+0+0  eDP-1
         1: +HDMI-1 2560/597x1440/336+1920+0  HDMI-1
    """
    devices = []
    for line in output.splitlines():
        match = _XRANDR_MONITOR.match(line)
        if not match:
            continue
        _, name, width, height, x, y = match.groups()
        geometry = ScreenGeometry(int(width), int(height), int(x), int(y))
        devices.append(
            CaptureDevice(
                kind=DeviceKind.SCREEN,
                index=len(devices),
                name=name,
                identifier=f"{display}+{geometry.x},{geometry.y}",
                geometry=geometry,
            ),
        )
    return devices


def parse_xdpyinfo_screens(output: str, display: str) -> list[CaptureDevice]:
    """
    Parse `xdpyinfo` screen sections.

    Each X screen becomes one device covering the whole screen.
    """
    devices = []
    base = display_base(display)
    screen_number = None

    for line in output.splitlines():
        screen_match = _XDPYINFO_SCREEN.match(line)
        if screen_match:
            screen_number = int(screen_match.group(1))
            continue

        dimensions = _XDPYINFO_DIMENSIONS.match(line)
        if dimensions and screen_number is not None:
            geometry = ScreenGeometry(int(dimensions.group(1)), int(dimensions.group(2)))
            devices.append(
                CaptureDevice(
                    kind=DeviceKind.SCREEN,
                    index=len(devices),
                    name=f"Screen {screen_number}",
                    identifier=f"{base}.{screen_number}+0,0",
                    geometry=geometry,
                ),
            )
            screen_number = None

    return devices


def parse_arecord_devices(output: str) -> list[CaptureDevice]:
    """
    Parse `arecord -l` (ALSA capture hardware).

    Returns:
        One audio device per card/device pair, identifier "hw:card,device"
    """
    devices = []
    for line in output.splitlines():
        match = _ARECORD_DEVICE.match(line)
        if not match:
            continue
        card, _, card_name, device, _, device_name = match.groups()
        devices.append(
            CaptureDevice(
                kind=DeviceKind.AUDIO,
                index=len(devices),
                name=f"{card_name}: {device_name}",
                identifier=f"hw:{card},{device}",
            ),
        )
    return devices


def parse_v4l2_devices(output: str) -> list[CaptureDevice]:
    """
    Parse `v4l2-ctl --list-devices`.

    Cards are listed unindented, their nodes indented below. Only the first
    /dev/video node of each card is used: the others are metadata nodes.

    Example:
        Integrated Camera: Integrated C (usb-0000:00:14.0-8):
                /dev/video0
                /dev/video1
                /dev/media0
    """
    devices = []
    card_name = None
    card_taken = False

    for line in output.splitlines():
        if not line.strip():
            card_name = None
            continue

        if not line[0].isspace():
            card_name = _V4L2_BUS_INFO.sub("", line.strip().rstrip(":")).strip()
            card_taken = False
            continue

        node = line.strip()
        if card_name is not None and not card_taken and node.startswith("/dev/video"):
            devices.append(
                CaptureDevice(
                    kind=DeviceKind.CAMERA,
                    index=len(devices),
                    name=card_name,
                    identifier=node,
                ),
            )
            card_taken = True

    return devices


def parse_avfoundation_devices(output: str) -> dict[DeviceKind, list[CaptureDevice]]:
    """
    Parse `ffmpeg -f avfoundation -list_devices true -i ""`.

    Video devices named "Capture screen N" are screens, other video devices
    are cameras. The identifier is ffmpeg's avfoundation index, which is
    not the same as the per-kind index.

    Returns:
        Devices keyed by kind
    """
    devices: dict[DeviceKind, list[CaptureDevice]] = {
        DeviceKind.SCREEN: [],
        DeviceKind.AUDIO: [],
        DeviceKind.CAMERA: [],
    }
    section = None

    for line in output.splitlines():
        if AVFOUNDATION_VIDEO_MARKER in line:
            section = "video"
            continue
        if AVFOUNDATION_AUDIO_MARKER in line:
            section = "audio"
            continue

        match = _AVFOUNDATION_DEVICE.search(line)
        if not match or section is None:
            continue

        av_index, name = match.groups()
        if section == "audio":
            kind = DeviceKind.AUDIO
        elif name.startswith(AVFOUNDATION_SCREEN_PREFIX):
            kind = DeviceKind.SCREEN
        else:
            kind = DeviceKind.CAMERA

        devices[kind].append(
            CaptureDevice(
                kind=kind,
                index=len(devices[kind]),
                name=name,
                identifier=av_index,
            ),
        )

    return devices
