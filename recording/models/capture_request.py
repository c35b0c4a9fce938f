"""
Capture Request Models

What to record (CaptureSelection) and how (CaptureOptions).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from config.settings import (
    DEFAULT_AUDIO_ARGS,
    DEFAULT_CAMERA_ARGS,
    DEFAULT_CAMERA_MARGIN,
    DEFAULT_OUTPUT_ARGS,
    DEFAULT_SCREEN_ARGS,
    FFMPEG_BINARY,
)
from devices.constants import DeviceKind
from devices.models.capture_device import CaptureDevice
from recording.constants import CameraPosition


@dataclass
class CaptureSelection:
    """
    Devices chosen for one recording. None means "do not record this".
    """

    screen: Optional[CaptureDevice] = None
    audio: Optional[CaptureDevice] = None
    camera: Optional[CaptureDevice] = None

    def devices(self) -> list[CaptureDevice]:
        """Selected devices in ffmpeg input order: screen, audio, camera"""
        return [
            device
            for device in (self.screen, self.audio, self.camera)
            if device is not None
        ]

    def is_empty(self) -> bool:
        return not self.devices()


@dataclass
class CaptureOptions:
    """
    Extra ffmpeg arguments and output settings for one recording.

    Argument strings are split shell-style when the command is built,
    so quoting works as on a command line.
    """

    output_file: Path
    screen_args: str = DEFAULT_SCREEN_ARGS
    audio_args: str = DEFAULT_AUDIO_ARGS
    camera_args: str = DEFAULT_CAMERA_ARGS
    output_args: str = DEFAULT_OUTPUT_ARGS
    camera_position: CameraPosition = CameraPosition.BOTTOM_RIGHT
    camera_margin: int = DEFAULT_CAMERA_MARGIN
    ffmpeg: str = FFMPEG_BINARY

    def input_args(self, kind: DeviceKind) -> str:
        """Extra arguments for one input kind"""
        return {
            DeviceKind.SCREEN: self.screen_args,
            DeviceKind.AUDIO: self.audio_args,
            DeviceKind.CAMERA: self.camera_args,
        }[kind]
