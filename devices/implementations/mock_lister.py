"""
Mock Device Lister

Fixed device lists for testing without xrandr, arecord, v4l2-ctl or a
real display. Also selectable at runtime (SCREENCAST_DEVICE_MODE=mock) to
preview commands on a machine without capture hardware.

This is a "Fake" (test double) - it has working logic but no real tools.
"""

import logging
from typing import Optional, Sequence

from core.errors import ToolNotFoundError
from core.platform import Platform
from devices.constants import DARWIN_INPUT_FORMAT, LINUX_INPUT_FORMATS, DeviceKind
from devices.interfaces.device_lister_interface import DeviceListerInterface
from devices.models.capture_device import CaptureDevice, ScreenGeometry


def default_mock_devices(platform: Platform) -> dict[DeviceKind, list[CaptureDevice]]:
    """One screen, one microphone and one camera looking like real ones"""
    if platform is Platform.DARWIN:
        return {
            DeviceKind.SCREEN: [
                CaptureDevice(DeviceKind.SCREEN, 0, "Capture screen 0", "1"),
            ],
            DeviceKind.AUDIO: [
                CaptureDevice(DeviceKind.AUDIO, 0, "Built-in Microphone", "0"),
            ],
            DeviceKind.CAMERA: [
                CaptureDevice(DeviceKind.CAMERA, 0, "FaceTime HD Camera", "0"),
            ],
        }
    return {
        DeviceKind.SCREEN: [
            CaptureDevice(
                DeviceKind.SCREEN, 0, "Mock-1", ":0.0+0,0", ScreenGeometry(1920, 1080),
            ),
        ],
        DeviceKind.AUDIO: [
            CaptureDevice(DeviceKind.AUDIO, 0, "Mock Audio: Mock Analog", "hw:0,0"),
        ],
        DeviceKind.CAMERA: [
            CaptureDevice(DeviceKind.CAMERA, 0, "Mock Camera", "/dev/video0"),
        ],
    }


class MockDeviceLister(DeviceListerInterface):
    """
    Mock device lister for testing.

    Usage:
        lister = MockDeviceLister()
        lister.set_devices(DeviceKind.SCREEN, [])  # simulate no screens
        lister.set_missing_tools(["v4l2-ctl"])     # simulate missing tool
    """

    def __init__(
        self,
        platform: Platform = Platform.LINUX,
        devices: Optional[dict[DeviceKind, list[CaptureDevice]]] = None,
    ):
        """
        Initialize mock lister.

        Args:
            platform: Which platform to imitate (input formats, defaults)
            devices: Devices per kind (None = one of each)
        """
        super().__init__(which=self._which_mock)
        self.logger = logging.getLogger(__name__)
        self.platform = platform
        self._devices = devices if devices is not None else default_mock_devices(platform)
        self._missing: list[str] = []

        # Test helpers
        self.list_calls: list[DeviceKind] = []

        self.logger.info(f"Mock Device Lister initialized (platform: {platform.value})")

    def _which_mock(self, tool: str) -> Optional[str]:
        if tool in self._missing:
            return None
        return f"/usr/bin/{tool}"

    def list_devices(self, kind: DeviceKind) -> list[CaptureDevice]:
        self.list_calls.append(kind)
        for alternatives in self.required_tools(kind):
            if all(tool in self._missing for tool in alternatives):
                raise ToolNotFoundError(" or ".join(alternatives))
        return list(self._devices.get(kind, []))

    def required_tools(self, kind: DeviceKind) -> list[tuple[str, ...]]:
        if self.platform is Platform.DARWIN:
            return [("ffmpeg",)]
        if kind is DeviceKind.SCREEN:
            return [("xrandr", "xdpyinfo")]
        if kind is DeviceKind.AUDIO:
            return [("arecord",)]
        return [("v4l2-ctl",)]

    def input_format(self, kind: DeviceKind) -> str:
        if self.platform is Platform.DARWIN:
            return DARWIN_INPUT_FORMAT
        return LINUX_INPUT_FORMATS[kind]

    # =========================================================================
    # TEST HELPER METHODS
    # =========================================================================

    def set_devices(self, kind: DeviceKind, devices: Sequence[CaptureDevice]) -> None:
        """Replace the devices reported for one kind"""
        self._devices[kind] = list(devices)

    def set_missing_tools(self, tools: Sequence[str]) -> None:
        """Pretend these tools are not installed"""
        self._missing = list(tools)
