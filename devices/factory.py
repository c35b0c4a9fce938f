"""
Device Factory

Factory pattern for creating device listers.
Selects the backend for the current OS, or the mock lister on request.
"""

import logging
from typing import Literal, Optional

from config.settings import FFMPEG_BINARY
from core.errors import ToolNotFoundError
from core.platform import Platform, detect_platform
from devices.implementations.darwin_lister import DarwinDeviceLister
from devices.implementations.linux_lister import LinuxDeviceLister
from devices.implementations.mock_lister import MockDeviceLister
from devices.interfaces.device_lister_interface import DeviceListerInterface

# Type alias for better type hints
DeviceMode = Literal["auto", "real", "mock"]


class DeviceFactory:
    """
    Factory for creating device listers.

    Unlike the capture factory, "auto" never falls back to the mock:
    listing fake devices on a real machine would build commands that
    cannot work. Missing tools are only logged and reported later, when a
    kind of device is actually listed.

    Usage:
        # Backend for this OS
        lister = DeviceFactory.create_lister()

        # Fake devices (tests, previewing commands)
        lister = DeviceFactory.create_lister(mode="mock")

        # Backend for this OS, raising if any listing tool is missing
        lister = DeviceFactory.create_lister(mode="real")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_lister(
        cls,
        mode: DeviceMode = "auto",
        platform: Optional[Platform] = None,
        ffmpeg: str = FFMPEG_BINARY,
        display: Optional[str] = None,
    ) -> DeviceListerInterface:
        """
        Create a device lister.

        Args:
            mode: "auto" (OS backend), "real" (OS backend, all tools required),
                  "mock" (fixed fake devices)
            platform: Platform to target (None = detect)
            ffmpeg: ffmpeg binary (macOS lists devices with ffmpeg)
            display: X11 display (Linux only, None = $DISPLAY)

        Returns:
            DeviceListerInterface implementation

        Raises:
            UnsupportedPlatformError: Not Linux or macOS
            ToolNotFoundError: mode="real" and a listing tool is missing
        """
        platform = platform or detect_platform()

        if mode == "mock":
            cls._logger.info(f"Creating Mock Device Lister ({platform.value})")
            return MockDeviceLister(platform=platform)

        if platform is Platform.DARWIN:
            lister: DeviceListerInterface = DarwinDeviceLister(ffmpeg=ffmpeg)
        else:
            lister = LinuxDeviceLister(display=display)

        missing = lister.missing_tools()
        if missing:
            if mode == "real":
                raise ToolNotFoundError(", ".join(missing))
            cls._logger.warning(f"Device listing tools not installed: {', '.join(missing)}")

        cls._logger.info(f"Creating {type(lister).__name__}")
        return lister
