"""
Platform and Tool Probing

Detects the operating system and wraps the external listing tools
(xrandr, arecord, v4l2-ctl, ffmpeg) the device listers scrape.
"""

import logging
import shutil
import subprocess
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from config.settings import TOOL_INSTALL_HINTS, TOOL_TIMEOUT_SECONDS
from core.errors import DeviceError, ToolNotFoundError, UnsupportedPlatformError

logger = logging.getLogger(__name__)


class Platform(Enum):
    """Operating systems with a capture backend"""

    LINUX = "linux"
    DARWIN = "darwin"


@dataclass
class ToolOutput:
    """Captured result of running a listing tool"""

    returncode: int
    stdout: str
    stderr: str

    @property
    def text(self) -> str:
        """stdout and stderr together (ffmpeg lists devices on stderr)"""
        return f"{self.stdout}\n{self.stderr}"


def detect_platform(system: Optional[str] = None) -> Platform:
    """
    Detect which capture backend to use.

    Args:
        system: Value of sys.platform to inspect (None = current)

    Returns:
        Platform.LINUX or Platform.DARWIN

    Raises:
        UnsupportedPlatformError: On any other OS
    """
    system = system or sys.platform
    if system.startswith("linux"):
        return Platform.LINUX
    if system == "darwin":
        return Platform.DARWIN
    raise UnsupportedPlatformError(
        f"Unsupported platform: {system} (only Linux and macOS are supported)",
    )


def find_tool(name: str) -> Optional[str]:
    """Return the full path of a tool on PATH, or None"""
    return shutil.which(name)


def require_tool(name: str) -> str:
    """
    Return the full path of a tool, raising if it is missing.

    Raises:
        ToolNotFoundError: Tool not on PATH
    """
    path = find_tool(name)
    if path is None:
        raise ToolNotFoundError(name, TOOL_INSTALL_HINTS.get(name, ""))
    return path


def run_tool(
    args: Sequence[str],
    timeout: float = TOOL_TIMEOUT_SECONDS,
) -> ToolOutput:
    """
    Run a device listing tool and capture its text output.

    The return code is not checked: `ffmpeg -list_devices` always exits
    non-zero because it has no real input. Callers parse the text.

    Args:
        args: Command and arguments
        timeout: Seconds before giving up

    Returns:
        ToolOutput with return code, stdout and stderr

    Raises:
        ToolNotFoundError: Binary does not exist
        DeviceError: Tool did not finish within timeout
    """
    logger.debug(f"Running: {' '.join(args)}")
    try:
        result = subprocess.run(
            list(args),
            check=False,
            capture_output=True,
            text=True,
            stdin=subprocess.DEVNULL,
            timeout=timeout,
        )
    except FileNotFoundError:
        raise ToolNotFoundError(args[0], TOOL_INSTALL_HINTS.get(args[0], ""))
    except subprocess.TimeoutExpired:
        raise DeviceError(f"{args[0]} did not respond within {timeout}s")

    logger.debug(f"{args[0]} exited with code {result.returncode}")
    return ToolOutput(
        returncode=result.returncode,
        stdout=result.stdout or "",
        stderr=result.stderr or "",
    )
