"""
Requirements Check Tests

To run:
    pytest tests/cli/test_doctor.py -v
"""

import io

import pytest

from cli.doctor import CheckResult, print_report, required_input_formats, run_checks
from core.platform import Platform
from devices.implementations.mock_lister import MockDeviceLister
from recording.implementations.mock_capture import MockCapture


def results_by_name(results):
    return {result.name: result for result in results}


@pytest.mark.unit
def test_all_requirements_met(lister, capture, config_path):
    """Test every check passes with all tools present."""
    results = run_checks(lister, capture, config_path)

    assert [result.name for result in results] == [
        "Platform",
        "ffmpeg",
        "ffmpeg x11grab",
        "ffmpeg alsa",
        "ffmpeg v4l2",
        "Screens listing",
        "Microphones listing",
        "Cameras listing",
        "Config file",
    ]
    assert all(result.ok for result in results)


@pytest.mark.unit
def test_missing_ffmpeg_skips_format_checks(lister, config_path):
    """Test input formats are not checked without ffmpeg."""
    results = results_by_name(run_checks(lister, MockCapture(available=False), config_path))

    assert not results["ffmpeg"].ok
    assert "ffmpeg x11grab" not in results


@pytest.mark.unit
def test_ffmpeg_without_input_format(lister, config_path):
    """Test an ffmpeg build lacking an input device fails that check."""
    capture = MockCapture(input_formats={"alsa", "v4l2"})

    results = results_by_name(run_checks(lister, capture, config_path))

    assert not results["ffmpeg x11grab"].ok
    assert results["ffmpeg alsa"].ok


@pytest.mark.unit
def test_missing_listing_tool(lister, capture, config_path):
    """Test a missing listing tool fails its kind only."""
    lister.set_missing_tools(["v4l2-ctl"])

    results = results_by_name(run_checks(lister, capture, config_path))

    assert not results["Cameras listing"].ok
    assert "v4l2-ctl" in results["Cameras listing"].detail
    assert results["Screens listing"].ok


@pytest.mark.unit
def test_invalid_config_fails(lister, capture, config_path):
    """Test an invalid config file fails without being rewritten."""
    config_path.write_text("camera_position: middle\n")

    results = results_by_name(run_checks(lister, capture, config_path))

    assert not results["Config file"].ok
    assert config_path.read_text() == "camera_position: middle\n"


@pytest.mark.unit
def test_config_check_does_not_create_file(lister, capture, config_path):
    """Test checking a missing config leaves it missing."""
    results = results_by_name(run_checks(lister, capture, config_path))

    assert results["Config file"].ok
    assert not config_path.exists()


@pytest.mark.unit
def test_darwin_requires_avfoundation(capture, config_path):
    """Test macOS only needs the avfoundation input."""
    results = run_checks(MockDeviceLister(platform=Platform.DARWIN), capture, config_path)

    assert "ffmpeg avfoundation" in [result.name for result in results]
    assert required_input_formats(Platform.DARWIN) == ["avfoundation"]


@pytest.mark.unit
def test_print_report():
    """Test the report table and summary line."""
    stream = io.StringIO()
    results = [
        CheckResult("Platform", True, "linux"),
        CheckResult("ffmpeg", False, "not found in PATH"),
    ]

    passed = print_report(results, stream)

    lines = stream.getvalue().splitlines()
    assert not passed
    assert lines[0] == "Platform  OK    linux"
    assert lines[1] == "ffmpeg    FAIL  not found in PATH"
    assert lines[-1] == "Some requirements are missing."
