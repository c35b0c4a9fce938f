"""
Central Configuration File

ALL static configuration values live here. This is the single source of truth.

Guidelines:
- Per-user defaults (devices, extra ffmpeg args) live in the YAML config
  file handled by config/user_config.py, NOT here
- Values here can be overridden through environment variables or a .env file
- Import these settings in modules: from config.settings import EXIT_FAILURE
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# APPLICATION
# =============================================================================

APP_NAME = "screencast"
APP_VERSION = "0.1.0"
APP_DESCRIPTION = (
    "Record screen, microphone and camera with ffmpeg. "
    "Lists local capture devices and assembles the ffmpeg command for you."
)

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1  # Every detected failure exits with this code
EXIT_INTERRUPTED = 130  # Ctrl+C while prompting

# =============================================================================
# USER CONFIG FILE
# =============================================================================

# Fixed per-user location, overridable for testing or alternate profiles
USER_CONFIG_PATH = Path(
    os.getenv(
        "SCREENCAST_CONFIG",
        str(Path.home() / ".config" / APP_NAME / "config.yaml"),
    ),
).expanduser()

# =============================================================================
# EXTERNAL TOOLS
# =============================================================================

FFMPEG_BINARY = os.getenv("SCREENCAST_FFMPEG", "ffmpeg")

# Backend selection: "auto" uses the real tools, "mock" uses fake devices
# and records commands instead of running ffmpeg (preview without hardware)
DEVICE_MODE = os.getenv("SCREENCAST_DEVICE_MODE", "auto")
CAPTURE_MODE = os.getenv("SCREENCAST_CAPTURE_MODE", "auto")

# Timeout for device listing tools (seconds). The capture itself has no timeout.
TOOL_TIMEOUT_SECONDS = 10

# Install hints shown when a tool is missing
TOOL_INSTALL_HINTS = {
    "ffmpeg": "Install ffmpeg (apt install ffmpeg / brew install ffmpeg)",
    "xrandr": "Install xrandr (apt install x11-xserver-utils)",
    "xdpyinfo": "Install xdpyinfo (apt install x11-utils)",
    "arecord": "Install arecord (apt install alsa-utils)",
    "v4l2-ctl": "Install v4l2-ctl (apt install v4l-utils)",
}

# =============================================================================
# CAPTURE DEFAULTS
# =============================================================================

# Which sources to record when no -s/-a/-c flag is given
DEFAULT_RECORD_SCREEN = True
DEFAULT_RECORD_AUDIO = False
DEFAULT_RECORD_CAMERA = False

# Extra ffmpeg arguments per input (inserted before that input's -i).
# x11grab/v4l2 and avfoundation accept different options, and most Mac
# cameras only deliver their native sizes at 30 fps.
SCREEN_ARGS_BY_PLATFORM = {
    "linux": "-framerate 25 -draw_mouse 1",
    "darwin": "-framerate 30 -capture_cursor 1",
}
CAMERA_ARGS_BY_PLATFORM = {
    "linux": "-framerate 25 -video_size 320x240",
    "darwin": "-framerate 30",
}
HOST_PLATFORM = "darwin" if sys.platform == "darwin" else "linux"

DEFAULT_SCREEN_ARGS = SCREEN_ARGS_BY_PLATFORM[HOST_PLATFORM]
DEFAULT_AUDIO_ARGS = "-ac 2"
DEFAULT_CAMERA_ARGS = CAMERA_ARGS_BY_PLATFORM[HOST_PLATFORM]

# Extra ffmpeg arguments for the output (inserted before the output file)
DEFAULT_OUTPUT_ARGS = "-c:v libx264 -crf 0 -preset ultrafast -c:a aac"

DEFAULT_EXTENSION = "mkv"
DEFAULT_OUTPUT_DIR = "~/Desktop"
DEFAULT_FILENAME_FORMAT = "Screencast_%Y-%m-%d_%H-%M-%S"

# Camera picture-in-picture placement when recording screen and camera
DEFAULT_CAMERA_POSITION = "bottom-right"
DEFAULT_CAMERA_MARGIN = 10  # pixels from the screen edges

# X11 display used when DISPLAY is not set
DEFAULT_X11_DISPLAY = ":0.0"

# =============================================================================
# OUTPUT VALIDATION
# =============================================================================

# Warn (do not refuse) when less free space than this is left
LOW_SPACE_WARNING_GB = 2.0

# =============================================================================
# LOGGING
# =============================================================================

# WARNING by default so dry-run output on stdout stays clean
LOG_LEVEL = os.getenv("SCREENCAST_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
