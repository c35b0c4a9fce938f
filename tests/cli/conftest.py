"""
CLI Test Configuration and Fixtures

Runs the command line against mock devices and a mock ffmpeg, with a
config file in a temp directory.
"""

import io

import pytest

from cli.prompts import DevicePrompt
from core.platform import Platform
from devices.constants import DeviceKind
from devices.implementations.mock_lister import MockDeviceLister
from devices.models.capture_device import CaptureDevice, ScreenGeometry
from recording.implementations.mock_capture import MockCapture


class ScriptedAnswers:
    """
    Replays answers to prompts, raising EOFError when they run out.

    Usage:
        answers = ScriptedAnswers(["9", "1"])
        prompt = DevicePrompt(input_func=answers, interactive=True)
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def config_path(tmp_path):
    """Config file location inside the test's temp directory"""
    return tmp_path / "config.yaml"


@pytest.fixture
def two_screens():
    return [
        CaptureDevice(DeviceKind.SCREEN, 0, "eDP-1", ":0.0+0,0", ScreenGeometry(1920, 1080)),
        CaptureDevice(
            DeviceKind.SCREEN, 1, "HDMI-1", ":0.0+1920,0", ScreenGeometry(2560, 1440, 1920, 0),
        ),
    ]


@pytest.fixture
def lister(two_screens):
    """Linux mock lister with two screens, one microphone and one camera"""
    mock = MockDeviceLister(platform=Platform.LINUX)
    mock.set_devices(DeviceKind.SCREEN, two_screens)
    return mock


@pytest.fixture
def capture():
    return MockCapture()


@pytest.fixture
def quiet_prompt():
    """Prompt behaving as if stdin were not a terminal"""
    return DevicePrompt(stream=io.StringIO(), interactive=False)


@pytest.fixture
def scripted_prompt():
    """
    Build an interactive prompt answering from a list.

    Usage:
        def test_pick(scripted_prompt):
            prompt, answers = scripted_prompt(["1"])
    """
    def build(answers):
        scripted = ScriptedAnswers(answers)
        prompt = DevicePrompt(input_func=scripted, stream=io.StringIO(), interactive=True)
        return prompt, scripted
    return build
