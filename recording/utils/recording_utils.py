"""
Recording Utilities

Shared utility functions for recording operations.
"""

import logging
import re
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional

from config.settings import DEFAULT_EXTENSION, DEFAULT_FILENAME_FORMAT, LOW_SPACE_WARNING_GB

logger = logging.getLogger(__name__)

# " D  x11grab         X11 screen capture, using XCB"
# " DE alsa            ALSA audio output"
_FFMPEG_INPUT_DEVICE = re.compile(r"^\s?D[E ]\s+(\S+)")


def generate_filename(
    base_path: Path,
    format_string: str = DEFAULT_FILENAME_FORMAT,
    extension: str = DEFAULT_EXTENSION,
    now: Optional[datetime] = None,
) -> Path:
    """
    Generate timestamped filename for recording.

    Args:
        base_path: Directory where file will be saved
        format_string: strftime format for filename
        extension: File extension without dot (default: "mkv")
        now: Timestamp to use (None = current time)

    Returns:
        Complete file path with timestamp

    Example:
        path = generate_filename(Path("~/Desktop").expanduser())
        # Returns: /home/me/Desktop/Screencast_2025-01-15_14-30-22.mkv
    """
    timestamp = (now or datetime.now()).strftime(format_string)
    filename = f"{timestamp}.{extension.lstrip('.')}"
    return base_path / filename


def get_free_space_gb(path: Path) -> Optional[float]:
    """
    Get free disk space in GB for the filesystem holding path.

    Returns:
        Free space in GB, or None if it cannot be determined
    """
    try:
        stat = shutil.disk_usage(path)
    except OSError as e:
        logger.debug(f"Cannot check disk space of {path}: {e}")
        return None
    return stat.free / (1024 ** 3)


def validate_output_path(path: Path) -> tuple[bool, Optional[str]]:
    """
    Validate output path for recording.

    Checks:
    - Parent directory exists or can be created
    - Parent is a writable directory
    - Output path is not a directory

    Low disk space only logs a warning: screencasts can be short.

    Args:
        path: Output file path to validate

    Returns:
        Tuple of (is_valid, error_message)
        error_message is None if valid

    Example:
        valid, error = validate_output_path(Path("/recordings/video.mkv"))
        if not valid:
            print(f"Invalid path: {error}")
    """
    if path.is_dir():
        return False, f"Output path is a directory: {path}"

    parent = path.parent
    if not parent.exists():
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return False, f"Cannot create directory {parent}: {e}"

    if not parent.is_dir():
        return False, f"Parent path is not a directory: {parent}"

    # Try to write a test file
    test_file = parent / ".screencast_write_test"
    try:
        test_file.touch()
        test_file.unlink()
    except OSError as e:
        return False, f"Directory not writable: {parent} ({e})"

    free_gb = get_free_space_gb(parent)
    if free_gb is not None and free_gb < LOW_SPACE_WARNING_GB:
        logger.warning(f"Low disk space: {free_gb:.1f} GB free in {parent}")

    return True, None


def parse_ffmpeg_input_formats(output: str) -> set[str]:
    """
    Parse `ffmpeg -devices` into the set of input (demuxing) device formats.

    Entries like "sdl,sdl2" are split into their aliases.

    Example:
        Devices:
         D. = Demuxing supported
         .E = Muxing supported
         --
         DE alsa            ALSA audio output
         D  x11grab         X11 screen capture, using XCB
    """
    formats: set[str] = set()
    in_list = False

    for line in output.splitlines():
        if line.strip() == "--":
            in_list = True
            continue
        if not in_list:
            continue
        match = _FFMPEG_INPUT_DEVICE.match(line)
        if match:
            formats.update(match.group(1).split(","))

    return formats
