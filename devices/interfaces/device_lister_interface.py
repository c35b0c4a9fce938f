"""
Device Lister Interface

Abstract interface for capture device discovery.
Defines the contract every platform backend must follow.

Why an interface?
1. Testability: MockDeviceLister replaces xrandr/arecord/ffmpeg in tests
2. Flexibility: One backend per OS behind the same calls
3. Clear contract: Documents what a backend must provide
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from core.errors import DeviceNotFoundError
from core.platform import Platform, find_tool
from devices.constants import DeviceKind
from devices.models.capture_device import CaptureDevice


class DeviceListerInterface(ABC):
    """
    Abstract base class for device listers.

    Subclasses implement list_devices(), required_tools() and
    input_format(); lookups, tool checks and per-kind shortcuts are shared.
    """

    platform: Platform

    def __init__(self, which: Callable[[str], Optional[str]] = find_tool):
        """
        Args:
            which: Tool lookup function (shutil.which by default)
        """
        self._which = which

    @abstractmethod
    def list_devices(self, kind: DeviceKind) -> list[CaptureDevice]:
        """
        List capture devices of one kind.

        An empty list means the tool ran and found nothing.

        Raises:
            ToolNotFoundError: Listing tool for this kind is missing
            DeviceError: Listing tool failed
        """
        pass

    @abstractmethod
    def required_tools(self, kind: DeviceKind) -> list[tuple[str, ...]]:
        """
        Tools needed to list devices of one kind.

        Each tuple holds alternatives: any one of them is enough.

        Example:
            [("xrandr", "xdpyinfo")]
        """
        pass

    @abstractmethod
    def input_format(self, kind: DeviceKind) -> str:
        """ffmpeg input format (-f value) used to capture this kind"""
        pass

    # =========================================================================
    # SHARED HELPERS
    # =========================================================================

    def list_screens(self) -> list[CaptureDevice]:
        return self.list_devices(DeviceKind.SCREEN)

    def list_audio(self) -> list[CaptureDevice]:
        return self.list_devices(DeviceKind.AUDIO)

    def list_cameras(self) -> list[CaptureDevice]:
        return self.list_devices(DeviceKind.CAMERA)

    def get_device(self, kind: DeviceKind, index: int) -> CaptureDevice:
        """
        Get one device by its per-kind index.

        Raises:
            DeviceNotFoundError: No device with that index
        """
        devices = self.list_devices(kind)
        for device in devices:
            if device.index == index:
                return device

        if devices:
            available = ", ".join(str(device.index) for device in devices)
            raise DeviceNotFoundError(
                f"No {kind.value} device {index} (available: {available})",
            )
        raise DeviceNotFoundError(f"No {kind.value} device {index} (none found)")

    def missing_tools(self, kind: Optional[DeviceKind] = None) -> list[str]:
        """
        Names of required tools that are not installed.

        Args:
            kind: Only check tools for this kind (None = all kinds)

        Returns:
            One entry per unsatisfied requirement ("xrandr or xdpyinfo")
        """
        kinds = [kind] if kind else list(DeviceKind)
        missing = []
        for current in kinds:
            for alternatives in self.required_tools(current):
                if any(self._which(tool) for tool in alternatives):
                    continue
                entry = " or ".join(alternatives)
                if entry not in missing:
                    missing.append(entry)
        return missing

    def is_available(self, kind: Optional[DeviceKind] = None) -> bool:
        """Check if every listing tool is installed"""
        return not self.missing_tools(kind)
