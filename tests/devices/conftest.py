"""
Devices Test Configuration and Fixtures

Captured output of the listing tools, and a fake tool runner feeding it
to the listers.
"""

import pytest

from core.errors import ToolNotFoundError
from core.platform import Platform, ToolOutput
from devices.implementations.mock_lister import MockDeviceLister

# =============================================================================
# CAPTURED TOOL OUTPUT
# =============================================================================

XRANDR_OUTPUT = """\
Monitors: 2
 0: +*eDP-1 1920/344x1080/193+0+0  eDP-1
 1: +HDMI-1 2560/597x1440/336+1920+0  HDMI-1
"""

XDPYINFO_OUTPUT = """\
name of display:    :0
version number:    11.0
number of screens:    1

screen #0:
  dimensions:    3840x1080 pixels (1016x286 millimeters)
  resolution:    96x96 dots per inch
  depths (7):    24, 1, 4, 8, 15, 16, 32
"""

ARECORD_OUTPUT = """\
**** List of CAPTURE Hardware Devices ****
card 0: PCH [HDA Intel PCH], device 0: ALC3246 Analog [ALC3246 Analog]
  Subdevices: 1/1
  Subdevice #0: subdevice #0
card 2: Camera [USB Camera], device 0: USB Audio [USB Audio]
  Subdevices: 1/1
  Subdevice #0: subdevice #0
"""

V4L2_OUTPUT = """\
Integrated Camera: Integrated C (usb-0000:00:14.0-8):
\t/dev/video0
\t/dev/video1
\t/dev/media0

USB Camera: USB Camera (usb-0000:00:14.0-2):
\t/dev/video2
\t/dev/video3
\t/dev/media1
"""

AVFOUNDATION_OUTPUT = """\
[AVFoundation indev @ 0x7f8c5d504080] AVFoundation video devices:
[AVFoundation indev @ 0x7f8c5d504080] [0] FaceTime HD Camera
[AVFoundation indev @ 0x7f8c5d504080] [1] Capture screen 0
[AVFoundation indev @ 0x7f8c5d504080] [2] Capture screen 1
[AVFoundation indev @ 0x7f8c5d504080] AVFoundation audio devices:
[AVFoundation indev @ 0x7f8c5d504080] [0] MacBook Pro Microphone
[AVFoundation indev @ 0x7f8c5d504080] [1] ZoomAudioDevice
: Input/output error
"""


@pytest.fixture
def xrandr_output():
    return XRANDR_OUTPUT


@pytest.fixture
def xdpyinfo_output():
    return XDPYINFO_OUTPUT


@pytest.fixture
def arecord_output():
    return ARECORD_OUTPUT


@pytest.fixture
def v4l2_output():
    return V4L2_OUTPUT


@pytest.fixture
def avfoundation_output():
    return AVFOUNDATION_OUTPUT


# =============================================================================
# FAKE TOOL RUNNER
# =============================================================================


class FakeRunner:
    """
    Stands in for core.platform.run_tool.

    Returns canned output keyed by tool name. Tools without an entry raise
    ToolNotFoundError like a missing binary would.
    """

    def __init__(self, stdout=None, stderr=None):
        self.stdout = dict(stdout or {})
        self.stderr = dict(stderr or {})
        self.calls = []

    def __call__(self, args):
        self.calls.append(list(args))
        tool = args[0]
        if tool not in self.stdout and tool not in self.stderr:
            raise ToolNotFoundError(tool)
        return ToolOutput(
            returncode=0 if tool in self.stdout else 1,
            stdout=self.stdout.get(tool, ""),
            stderr=self.stderr.get(tool, ""),
        )

    def tools_called(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def make_runner():
    """
    Provide the FakeRunner class.

    Usage:
        def test_listing(make_runner):
            runner = make_runner({"arecord": "..."})
    """
    return FakeRunner


@pytest.fixture
def linux_runner():
    """Fake runner with every Linux listing tool installed"""
    return FakeRunner(
        {
            "xrandr": XRANDR_OUTPUT,
            "xdpyinfo": XDPYINFO_OUTPUT,
            "arecord": ARECORD_OUTPUT,
            "v4l2-ctl": V4L2_OUTPUT,
        },
    )


@pytest.fixture
def darwin_runner():
    """Fake runner printing the avfoundation listing on stderr, as ffmpeg does"""
    return FakeRunner(stderr={"ffmpeg": AVFOUNDATION_OUTPUT})


# =============================================================================
# TOOL LOOKUP
# =============================================================================


@pytest.fixture
def which_all():
    """Tool lookup finding every tool"""
    return lambda tool: f"/usr/bin/{tool}"


@pytest.fixture
def which_none():
    """Tool lookup finding nothing"""
    return lambda tool: None


# =============================================================================
# MOCK LISTER
# =============================================================================


@pytest.fixture
def mock_lister():
    """Mock lister imitating Linux with one device of each kind"""
    return MockDeviceLister(platform=Platform.LINUX)


@pytest.fixture
def mock_lister_darwin():
    """Mock lister imitating macOS with one device of each kind"""
    return MockDeviceLister(platform=Platform.DARWIN)
