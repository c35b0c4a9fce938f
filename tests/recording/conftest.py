"""
Recording Test Configuration and Fixtures

Shared fixtures for recording module tests.
"""

import pytest

from devices.constants import DeviceKind
from devices.models.capture_device import CaptureDevice, ScreenGeometry
from recording.implementations.mock_capture import MockCapture
from recording.models.capture_request import CaptureOptions, CaptureSelection

# =============================================================================
# CAPTURE FIXTURES
# =============================================================================


@pytest.fixture
def mock_capture():
    """
    Provide MockCapture reporting a clean ffmpeg exit.

    Usage:
        def test_capture(mock_capture):
            mock_capture.run(["ffmpeg", "out.mkv"])
    """
    return MockCapture(returncode=0)


# =============================================================================
# DEVICE FIXTURES
# =============================================================================


@pytest.fixture
def linux_screen():
    return CaptureDevice(
        DeviceKind.SCREEN, 1, "HDMI-1", ":0.0+1920,0", ScreenGeometry(2560, 1440, 1920, 0),
    )


@pytest.fixture
def linux_audio():
    return CaptureDevice(DeviceKind.AUDIO, 0, "HDA Intel PCH: ALC3246 Analog", "hw:0,0")


@pytest.fixture
def linux_camera():
    return CaptureDevice(DeviceKind.CAMERA, 0, "Integrated Camera", "/dev/video0")


@pytest.fixture
def linux_selection(linux_screen, linux_audio, linux_camera):
    """Screen, microphone and camera on Linux"""
    return CaptureSelection(screen=linux_screen, audio=linux_audio, camera=linux_camera)


@pytest.fixture
def darwin_selection():
    """Screen, microphone and camera on macOS (avfoundation indexes)"""
    return CaptureSelection(
        screen=CaptureDevice(DeviceKind.SCREEN, 0, "Capture screen 0", "1"),
        audio=CaptureDevice(DeviceKind.AUDIO, 0, "MacBook Pro Microphone", "0"),
        camera=CaptureDevice(DeviceKind.CAMERA, 0, "FaceTime HD Camera", "0"),
    )


# =============================================================================
# OPTIONS FIXTURES
# =============================================================================


@pytest.fixture
def plain_options(tmp_path):
    """
    Options without extra arguments, writing into a temp directory.

    Keeps expected commands short in assertions.
    """
    return CaptureOptions(
        output_file=tmp_path / "out.mkv",
        screen_args="",
        audio_args="",
        camera_args="",
        output_args="",
        ffmpeg="ffmpeg",
    )
