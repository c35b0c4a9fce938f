"""
Devices Module

Capture device discovery for Linux (X11, ALSA, Video4Linux) and macOS
(AVFoundation).

Architecture mirrors the recording module:
- interfaces/: Abstract base class (contract)
- implementations/: Linux, macOS and mock listers
- models/: Device data structures
- utils/: Tool output parsers

Public API:
    - DeviceFactory: Lister for the current OS
    - DeviceListerInterface: Lister contract
    - CaptureDevice / ScreenGeometry: Device model
    - DeviceKind: Screen, audio or camera

Usage:
    from devices import DeviceFactory, DeviceKind

    lister = DeviceFactory.create_lister()
    for device in lister.list_devices(DeviceKind.CAMERA):
        print(device.label)
"""

from devices.constants import DeviceKind
from devices.factory import DeviceFactory
from devices.interfaces.device_lister_interface import DeviceListerInterface
from devices.models.capture_device import CaptureDevice, ScreenGeometry

__all__ = [
    "CaptureDevice",
    "DeviceFactory",
    "DeviceKind",
    "DeviceListerInterface",
    "ScreenGeometry",
]
