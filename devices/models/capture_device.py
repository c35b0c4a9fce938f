"""
Capture Device Model

Data structure describing one screen, microphone or camera.
"""

from dataclasses import dataclass
from typing import Optional

from devices.constants import DeviceKind


@dataclass(frozen=True)
class ScreenGeometry:
    """
    Size and position of a monitor on the X11 desktop.

    Example:
        ScreenGeometry(2560, 1440, 1920, 0).size -> "2560x1440"
    """

    width: int
    height: int
    x: int = 0
    y: int = 0

    @property
    def size(self) -> str:
        """Size as ffmpeg -video_size value"""
        return f"{self.width}x{self.height}"

    def __str__(self) -> str:
        return f"{self.width}x{self.height}+{self.x}+{self.y}"


@dataclass(frozen=True)
class CaptureDevice:
    """
    One capture source found on this machine.

    Attributes:
        kind: Screen, audio or camera
        index: 0-based position within its kind, what -sN/-aN/-cN refer to
        name: Human readable name
        identifier: Value passed to ffmpeg -i (":0.0+0,0", "hw:1,0",
            "/dev/video0", avfoundation index)
        geometry: Monitor geometry, when known (Linux screens)
    """

    kind: DeviceKind
    index: int
    name: str
    identifier: str
    geometry: Optional[ScreenGeometry] = None

    @property
    def label(self) -> str:
        """One-line description for listings and prompts"""
        details = self.identifier
        if self.geometry is not None:
            details = f"{self.identifier}, {self.geometry.size}"
        return f"[{self.index}] {self.name} ({details})"

    def __str__(self) -> str:
        return self.label
