"""
Device Implementations Package

Exposes concrete device listers.
"""

from devices.implementations.darwin_lister import DarwinDeviceLister
from devices.implementations.linux_lister import LinuxDeviceLister
from devices.implementations.mock_lister import MockDeviceLister

__all__ = [
    "DarwinDeviceLister",
    "LinuxDeviceLister",
    "MockDeviceLister",
]
