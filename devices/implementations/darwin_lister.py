"""
macOS Device Lister

Discovers screens, microphones and cameras through ffmpeg's own
avfoundation device listing. A single ffmpeg call covers all three kinds.
"""

import logging
from typing import Callable, Optional, Sequence

from config.settings import FFMPEG_BINARY
from core.errors import DeviceError
from core.platform import Platform, ToolOutput, find_tool, run_tool
from devices.constants import (
    AVFOUNDATION_VIDEO_MARKER,
    DARWIN_INPUT_FORMAT,
    DeviceKind,
    avfoundation_list_command,
)
from devices.interfaces.device_lister_interface import DeviceListerInterface
from devices.models.capture_device import CaptureDevice
from devices.utils.parsers import parse_avfoundation_devices

ToolRunner = Callable[[Sequence[str]], ToolOutput]


class DarwinDeviceLister(DeviceListerInterface):
    """
    Device discovery for macOS (AVFoundation).

    Usage:
        lister = DarwinDeviceLister()
        cameras = lister.list_cameras()
    """

    platform = Platform.DARWIN

    def __init__(
        self,
        ffmpeg: str = FFMPEG_BINARY,
        runner: ToolRunner = run_tool,
        which: Callable[[str], Optional[str]] = find_tool,
    ):
        super().__init__(which=which)
        self.logger = logging.getLogger(__name__)
        self.ffmpeg = ffmpeg
        self._run = runner
        self._devices: Optional[dict[DeviceKind, list[CaptureDevice]]] = None

    def list_devices(self, kind: DeviceKind) -> list[CaptureDevice]:
        if self._devices is None:
            output = self._run(avfoundation_list_command(self.ffmpeg))
            # ffmpeg always exits non-zero here; the marker tells us it listed
            if AVFOUNDATION_VIDEO_MARKER not in output.text:
                raise DeviceError(
                    "ffmpeg did not list any AVFoundation devices "
                    "(is it built with --enable-avfoundation?)",
                )
            self._devices = parse_avfoundation_devices(output.text)
            for current, devices in self._devices.items():
                self.logger.info(f"Found {len(devices)} {current.value} device(s)")

        return list(self._devices[kind])

    def required_tools(self, kind: DeviceKind) -> list[tuple[str, ...]]:
        return [(self.ffmpeg,)]

    def input_format(self, kind: DeviceKind) -> str:
        return DARWIN_INPUT_FORMAT
