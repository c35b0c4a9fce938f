"""
Recording Constants

FFmpeg-specific constants used to assemble the capture command.

Note: User-tunable values (extra arguments, extension, output directory)
live in config/settings.py and the user config file. This file only holds
values that are part of how the command is built.
"""

from enum import Enum

# =============================================================================
# FFMPEG COMMAND CONFIGURATION
# =============================================================================

# Global options placed right after the ffmpeg binary
FFMPEG_GLOBAL_ARGS = ["-hide_banner"]

# Lists capture-capable input devices compiled into ffmpeg
FFMPEG_DEVICES_ARGS = ["-hide_banner", "-devices"]

# avfoundation takes "<video>:<audio>"; "none" disables the other half
AVFOUNDATION_NO_DEVICE = "none"


# =============================================================================
# CAMERA OVERLAY
# =============================================================================


class CameraPosition(Enum):
    """
    Corner of the screen recording the camera picture is placed in.

    Values match the camera_position config knob.
    """

    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"


# ffmpeg overlay filter x:y expressions, {margin} in pixels
OVERLAY_EXPRESSIONS = {
    CameraPosition.TOP_LEFT: ("{margin}", "{margin}"),
    CameraPosition.TOP_RIGHT: ("main_w-overlay_w-{margin}", "{margin}"),
    CameraPosition.BOTTOM_LEFT: ("{margin}", "main_h-overlay_h-{margin}"),
    CameraPosition.BOTTOM_RIGHT: (
        "main_w-overlay_w-{margin}",
        "main_h-overlay_h-{margin}",
    ),
}


def overlay_filter(
    screen_input: int,
    camera_input: int,
    position: CameraPosition,
    margin: int,
) -> str:
    """
    Build the filter_complex graph placing the camera over the screen.

    Args:
        screen_input: ffmpeg input number of the screen
        camera_input: ffmpeg input number of the camera
        position: Corner to place the camera in
        margin: Distance from the screen edges in pixels

    Example:
        overlay_filter(0, 2, CameraPosition.BOTTOM_RIGHT, 10)
        -> "[0:v][2:v]overlay=main_w-overlay_w-10:main_h-overlay_h-10"
    """
    x, y = OVERLAY_EXPRESSIONS[position]
    return (
        f"[{screen_input}:v][{camera_input}:v]overlay="
        f"{x.format(margin=margin)}:{y.format(margin=margin)}"
    )
