"""
Device Interfaces Package

Exposes abstract interfaces for device discovery.
"""

from devices.interfaces.device_lister_interface import DeviceListerInterface

__all__ = [
    "DeviceListerInterface",
]
