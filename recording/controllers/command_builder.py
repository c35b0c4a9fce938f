"""
Capture Command Builder

Assembles the single ffmpeg command line recording the selected screen,
microphone and camera into one file.

Input order is always screen, audio, camera. When both a screen and a
camera are recorded, the camera is overlaid onto the screen picture.
"""

import logging
import shlex

from core.errors import CaptureError, NothingToRecordError
from core.platform import Platform
from devices.constants import DARWIN_INPUT_FORMAT, LINUX_INPUT_FORMATS, DeviceKind
from devices.models.capture_device import CaptureDevice
from recording.constants import AVFOUNDATION_NO_DEVICE, FFMPEG_GLOBAL_ARGS, overlay_filter
from recording.models.capture_request import CaptureOptions, CaptureSelection


def split_args(args: str, label: str = "ffmpeg") -> list[str]:
    """
    Split an extra-arguments string the way a shell would.

    Raises:
        CaptureError: Unbalanced quotes
    """
    try:
        return shlex.split(args or "")
    except ValueError as e:
        raise CaptureError(f"Invalid {label} arguments {args!r}: {e}") from e


class CaptureCommandBuilder:
    """
    Builds ffmpeg capture commands for one platform.

    Usage:
        builder = CaptureCommandBuilder(Platform.LINUX)
        command = builder.build(selection, options)
        subprocess.run(command)
    """

    def __init__(self, platform: Platform):
        self.logger = logging.getLogger(__name__)
        self.platform = platform

    def build(self, selection: CaptureSelection, options: CaptureOptions) -> list[str]:
        """
        Build the capture command.

        Args:
            selection: Devices to record
            options: Extra arguments and output file

        Returns:
            Command as argument list, ready for subprocess

        Raises:
            NothingToRecordError: No device selected
            CaptureError: Extra arguments cannot be parsed
        """
        if selection.is_empty():
            raise NothingToRecordError(
                "Nothing to record: select a screen (-s), audio (-a) or camera (-c)",
            )

        command = [options.ffmpeg, *FFMPEG_GLOBAL_ARGS]
        input_numbers: dict[DeviceKind, int] = {}

        for number, device in enumerate(selection.devices()):
            input_numbers[device.kind] = number
            extra = split_args(
                options.input_args(device.kind),
                label=f"{device.kind.value}",
            )
            command.extend(self._input_args(device, extra))

        if DeviceKind.SCREEN in input_numbers and DeviceKind.CAMERA in input_numbers:
            command.extend(
                [
                    "-filter_complex",
                    overlay_filter(
                        input_numbers[DeviceKind.SCREEN],
                        input_numbers[DeviceKind.CAMERA],
                        options.camera_position,
                        options.camera_margin,
                    ),
                ],
            )

        command.extend(split_args(options.output_args, label="output"))
        command.append(str(options.output_file))

        self.logger.debug(f"Built command: {format_command(command)}")
        return command

    def _input_args(self, device: CaptureDevice, extra: list[str]) -> list[str]:
        """Arguments for one ffmpeg input: -f <format> <extra> -i <device>"""
        if self.platform is Platform.DARWIN:
            return ["-f", DARWIN_INPUT_FORMAT, *extra, "-i", self._avfoundation_input(device)]

        args = ["-f", LINUX_INPUT_FORMATS[device.kind], *extra]

        # x11grab records the top-left region of this size from the offset
        # in the identifier; an explicit -video_size in the extra args wins
        if device.geometry is not None and "-video_size" not in extra:
            args.extend(["-video_size", device.geometry.size])

        args.extend(["-i", device.identifier])
        return args

    @staticmethod
    def _avfoundation_input(device: CaptureDevice) -> str:
        """avfoundation "<video>:<audio>" input for one device"""
        if device.kind is DeviceKind.AUDIO:
            return f":{device.identifier}"
        return f"{device.identifier}:{AVFOUNDATION_NO_DEVICE}"


def format_command(command: list[str]) -> str:
    """
    Render a command as one shell-quoted line.

    Example:
        format_command(["ffmpeg", "-i", ":0.0+0,0", "out file.mkv"])
        -> "ffmpeg -i :0.0+0,0 'out file.mkv'"
    """
    return shlex.join(command)
