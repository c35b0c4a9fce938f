"""
Linux Device Lister

Discovers X11 screens, ALSA microphones and Video4Linux cameras by
running xrandr/xdpyinfo, arecord and v4l2-ctl and scraping their output.
"""

import logging
import os
from typing import Callable, Optional, Sequence

from config.settings import DEFAULT_X11_DISPLAY, TOOL_INSTALL_HINTS
from core.errors import ToolNotFoundError
from core.platform import Platform, ToolOutput, find_tool, run_tool
from devices.constants import (
    ARECORD_COMMAND,
    LINUX_INPUT_FORMATS,
    V4L2_COMMAND,
    XDPYINFO_COMMAND,
    XRANDR_COMMAND,
    DeviceKind,
)
from devices.interfaces.device_lister_interface import DeviceListerInterface
from devices.models.capture_device import CaptureDevice
from devices.utils.parsers import (
    parse_arecord_devices,
    parse_v4l2_devices,
    parse_xdpyinfo_screens,
    parse_xrandr_monitors,
)

ToolRunner = Callable[[Sequence[str]], ToolOutput]


class LinuxDeviceLister(DeviceListerInterface):
    """
    Device discovery for Linux (X11 + ALSA + Video4Linux).

    Each kind is listed at most once per instance; the result is cached
    for the lifetime of the process.

    Usage:
        lister = LinuxDeviceLister()
        for screen in lister.list_screens():
            print(screen.label)
    """

    platform = Platform.LINUX

    def __init__(
        self,
        display: Optional[str] = None,
        runner: ToolRunner = run_tool,
        which: Callable[[str], Optional[str]] = find_tool,
    ):
        """
        Initialize Linux lister.

        Args:
            display: X11 display to capture (None = $DISPLAY or :0.0)
            runner: Function running a listing tool (for testing)
            which: Tool lookup function (for testing)
        """
        super().__init__(which=which)
        self.logger = logging.getLogger(__name__)
        self.display = display or os.environ.get("DISPLAY") or DEFAULT_X11_DISPLAY
        self._run = runner
        self._cache: dict[DeviceKind, list[CaptureDevice]] = {}

        self.logger.debug(f"Linux Device Lister initialized (display: {self.display})")

    def list_devices(self, kind: DeviceKind) -> list[CaptureDevice]:
        if kind not in self._cache:
            if kind is DeviceKind.SCREEN:
                devices = self._list_screens()
            elif kind is DeviceKind.AUDIO:
                devices = parse_arecord_devices(self._run(ARECORD_COMMAND).stdout)
            else:
                devices = parse_v4l2_devices(self._run(V4L2_COMMAND).stdout)

            self.logger.info(f"Found {len(devices)} {kind.value} device(s)")
            self._cache[kind] = devices

        return list(self._cache[kind])

    def _list_screens(self) -> list[CaptureDevice]:
        """
        List monitors with xrandr, falling back to whole X screens from
        xdpyinfo when xrandr is missing or reports nothing.
        """
        try:
            output = self._run(XRANDR_COMMAND)
            devices = parse_xrandr_monitors(output.stdout, self.display)
            if devices:
                return devices
            self.logger.info("xrandr reported no monitors, trying xdpyinfo")
        except ToolNotFoundError:
            self.logger.info("xrandr not installed, trying xdpyinfo")

        try:
            output = self._run(XDPYINFO_COMMAND + ["-display", self.display])
        except ToolNotFoundError:
            raise ToolNotFoundError(
                "xrandr or xdpyinfo",
                TOOL_INSTALL_HINTS["xrandr"],
            )
        return parse_xdpyinfo_screens(output.stdout, self.display)

    def required_tools(self, kind: DeviceKind) -> list[tuple[str, ...]]:
        if kind is DeviceKind.SCREEN:
            return [("xrandr", "xdpyinfo")]
        if kind is DeviceKind.AUDIO:
            return [("arecord",)]
        return [("v4l2-ctl",)]

    def input_format(self, kind: DeviceKind) -> str:
        return LINUX_INPUT_FORMATS[kind]
