"""
Device Factory Tests

To run:
    pytest tests/devices/test_device_factory.py -v
"""

import pytest

from core.errors import ToolNotFoundError
from core.platform import Platform
from devices.factory import DeviceFactory
from devices.implementations.darwin_lister import DarwinDeviceLister
from devices.implementations.linux_lister import LinuxDeviceLister
from devices.implementations.mock_lister import MockDeviceLister


@pytest.mark.unit
def test_mock_mode():
    """Test mock mode returns fake devices for the requested platform."""
    lister = DeviceFactory.create_lister(mode="mock", platform=Platform.DARWIN)

    assert isinstance(lister, MockDeviceLister)
    assert lister.platform is Platform.DARWIN


@pytest.mark.unit
def test_auto_mode_linux():
    """Test auto mode builds the Linux lister even if tools are missing."""
    lister = DeviceFactory.create_lister(mode="auto", platform=Platform.LINUX, display=":1")

    assert isinstance(lister, LinuxDeviceLister)
    assert lister.display == ":1"


@pytest.mark.unit
def test_auto_mode_darwin():
    """Test auto mode builds the macOS lister with the given ffmpeg."""
    lister = DeviceFactory.create_lister(
        mode="auto",
        platform=Platform.DARWIN,
        ffmpeg="/opt/bin/ffmpeg",
    )

    assert isinstance(lister, DarwinDeviceLister)
    assert lister.ffmpeg == "/opt/bin/ffmpeg"


@pytest.mark.unit
def test_real_mode_requires_tools():
    """Test real mode raises when a listing tool is missing."""
    with pytest.raises(ToolNotFoundError, match="no-such-ffmpeg-binary"):
        DeviceFactory.create_lister(
            mode="real",
            platform=Platform.DARWIN,
            ffmpeg="no-such-ffmpeg-binary",
        )
