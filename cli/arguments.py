"""
Command-Line Arguments

argparse definition of every flag. Source flags take an optional device
number glued to the flag (-s1, -a0, -c2) or separated by a space (-s 1).
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from config.settings import APP_DESCRIPTION, APP_NAME, APP_VERSION, EXIT_FAILURE

# Value stored when a source flag is given without a device number.
# Must not be a string: argparse passes string consts through type=.
PICK_DEVICE = -1

# Device number, or PICK_DEVICE
DeviceRequest = int

EPILOG = f"""\
examples:
  {APP_NAME}                       record with the defaults from the config file
  {APP_NAME} -s -a                 record a screen and a microphone (ask which)
  {APP_NAME} -s1 -a0 -c0           screen 1, microphone 0, camera 0 overlaid
  {APP_NAME} -s --oargs="-c:v libx264 -crf 23" -emp4
  {APP_NAME} -s -c --dry           only print the ffmpeg command
  {APP_NAME} --list                show all capture devices

Device numbers are the ones shown by --list.
Stop a recording with q or Ctrl+C.
"""


class ScreencastArgumentParser(argparse.ArgumentParser):
    """ArgumentParser exiting with the tool's fixed failure code"""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def device_number(value: str) -> int:
    """argparse type for device numbers (0, 1, ...)"""
    if not value.isdigit():
        raise argparse.ArgumentTypeError(f"invalid device number: {value!r}")
    return int(value)


def file_extension(value: str) -> str:
    """argparse type for output extensions (mkv, mp4, ...)"""
    extension = value.lstrip(".")
    if not extension or "/" in extension or "." in extension:
        raise argparse.ArgumentTypeError(f"invalid file extension: {value!r}")
    return extension


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser"""
    parser = ScreencastArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    sources = parser.add_argument_group("sources")
    sources.add_argument(
        "-s", "--screen",
        nargs="?", const=PICK_DEVICE, type=device_number, metavar="N",
        help="record screen N (no N: ask when there are several)",
    )
    sources.add_argument(
        "--sargs", metavar="ARGS",
        help="extra ffmpeg arguments for the screen input",
    )
    sources.add_argument(
        "-a", "--audio",
        nargs="?", const=PICK_DEVICE, type=device_number, metavar="N",
        help="record microphone N (no N: ask when there are several)",
    )
    sources.add_argument(
        "--aargs", metavar="ARGS",
        help="extra ffmpeg arguments for the audio input",
    )
    sources.add_argument(
        "-c", "--camera",
        nargs="?", const=PICK_DEVICE, type=device_number, metavar="N",
        help="record camera N, overlaid on the screen if one is recorded",
    )
    sources.add_argument(
        "--cargs", metavar="ARGS",
        help="extra ffmpeg arguments for the camera input",
    )

    output = parser.add_argument_group("output")
    output.add_argument(
        "--oargs", metavar="ARGS",
        help="extra ffmpeg arguments for the output (codecs, quality)",
    )
    output.add_argument(
        "-e", "--extension", type=file_extension, metavar="EXT",
        help="output file extension (default from config: mkv)",
    )
    output.add_argument(
        "-o", "--output", type=Path, metavar="FILE",
        help="output file (default: timestamped file in the output directory)",
    )
    output.add_argument(
        "--dry", action="store_true",
        help="print the ffmpeg command instead of running it",
    )

    info = parser.add_argument_group("information")
    info.add_argument("--list", action="store_true", help="list all capture devices")
    info.add_argument("--slist", action="store_true", help="list screens")
    info.add_argument("--alist", action="store_true", help="list microphones")
    info.add_argument("--clist", action="store_true", help="list cameras")
    info.add_argument(
        "--test", action="store_true",
        help="check that ffmpeg and the device listing tools are installed",
    )
    info.add_argument(
        "--version", action="version", version=f"%(prog)s {APP_VERSION}",
    )

    misc = parser.add_argument_group("miscellaneous")
    misc.add_argument(
        "--config", type=Path, metavar="FILE",
        help="use this config file instead of ~/.config/screencast/config.yaml",
    )
    misc.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="log progress to stderr (-vv for debug output)",
    )

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments (None = sys.argv)"""
    return build_parser().parse_args(argv)
