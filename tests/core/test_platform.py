"""
Platform and Tool Probing Tests

To run:
    pytest tests/core/test_platform.py -v
"""

import sys

import pytest

from core.errors import ToolNotFoundError, UnsupportedPlatformError
from core.platform import (
    Platform,
    ToolOutput,
    detect_platform,
    find_tool,
    require_tool,
    run_tool,
)

# =============================================================================
# PLATFORM DETECTION TESTS
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "system, expected",
    [("linux", Platform.LINUX), ("linux2", Platform.LINUX), ("darwin", Platform.DARWIN)],
)
def test_detect_supported_platforms(system, expected):
    """Test Linux and macOS are recognized."""
    assert detect_platform(system) is expected


@pytest.mark.unit
@pytest.mark.parametrize("system", ["win32", "cygwin", "freebsd13"])
def test_detect_unsupported_platform(system):
    """Test any other OS is refused with its name in the message."""
    with pytest.raises(UnsupportedPlatformError, match=system):
        detect_platform(system)


# =============================================================================
# TOOL LOOKUP TESTS
# =============================================================================


@pytest.mark.unit
def test_find_tool_missing():
    """Test a tool not on PATH gives None."""
    assert find_tool("no-such-tool-for-screencast") is None


@pytest.mark.unit
def test_require_tool_missing_has_hint(monkeypatch):
    """Test known tools come with an install hint."""
    monkeypatch.setattr("core.platform.shutil.which", lambda name: None)

    with pytest.raises(ToolNotFoundError) as exc_info:
        require_tool("v4l2-ctl")

    assert exc_info.value.tool == "v4l2-ctl"
    assert "v4l-utils" in str(exc_info.value)


@pytest.mark.unit
def test_require_tool_found(monkeypatch):
    """Test the full path of an installed tool is returned."""
    monkeypatch.setattr("core.platform.shutil.which", lambda name: f"/usr/bin/{name}")

    assert require_tool("arecord") == "/usr/bin/arecord"


@pytest.mark.unit
def test_require_tool_unknown_has_no_hint():
    """Test unknown tools raise without a hint."""
    with pytest.raises(ToolNotFoundError) as exc_info:
        require_tool("no-such-tool-for-screencast")

    assert exc_info.value.hint == ""
    assert str(exc_info.value) == "Required tool not found: no-such-tool-for-screencast"


# =============================================================================
# TOOL RUNNER TESTS
# =============================================================================


@pytest.mark.unit_integration
def test_run_tool_captures_both_streams():
    """Test stdout, stderr and the exit code are captured."""
    output = run_tool(
        [sys.executable, "-c", "import sys; print('out'); print('err', file=sys.stderr); sys.exit(1)"],
    )

    assert output.returncode == 1
    assert output.stdout.strip() == "out"
    assert output.stderr.strip() == "err"
    assert "out" in output.text and "err" in output.text


@pytest.mark.unit
def test_run_tool_missing_binary():
    """Test a missing binary becomes ToolNotFoundError."""
    with pytest.raises(ToolNotFoundError):
        run_tool(["no-such-tool-for-screencast", "--list"])


@pytest.mark.unit
def test_tool_output_text_joins_streams():
    """Test text holds stdout followed by stderr."""
    output = ToolOutput(returncode=0, stdout="a", stderr="b")

    assert output.text == "a\nb"
