"""
FFmpeg Capture Tests

Runs the current Python interpreter in place of ffmpeg so the process
handling is exercised without recording anything.

To run:
    pytest tests/recording/implementations/test_ffmpeg_capture.py -v
"""

import subprocess
import sys

import pytest

from core.errors import ToolNotFoundError
from recording.implementations.ffmpeg_capture import FFmpegCapture


@pytest.mark.unit_integration
def test_run_returns_exit_code():
    """Test the child's exit code is returned."""
    capture = FFmpegCapture(ffmpeg=sys.executable)

    assert capture.run([sys.executable, "-c", "raise SystemExit(0)"]) == 0
    assert capture.run([sys.executable, "-c", "raise SystemExit(3)"]) == 3


@pytest.mark.unit
def test_run_missing_binary():
    """Test a missing binary raises before anything starts."""
    capture = FFmpegCapture(ffmpeg="no-such-ffmpeg-binary")

    with pytest.raises(ToolNotFoundError) as exc_info:
        capture.run(["no-such-ffmpeg-binary", "out.mkv"])

    assert exc_info.value.tool == "no-such-ffmpeg-binary"


@pytest.mark.unit
def test_unavailable_ffmpeg_reports_no_formats():
    """Test format probing without ffmpeg gives an empty set."""
    capture = FFmpegCapture(ffmpeg="no-such-ffmpeg-binary")

    assert not capture.is_available()
    assert capture.get_input_formats() == set()


class InterruptedOnce:
    """Child process whose first wait() is interrupted by Ctrl+C"""

    real_popen = subprocess.Popen

    def __init__(self, args):
        self.process = self.real_popen(args)
        self.wait_calls = 0

    def wait(self):
        self.wait_calls += 1
        if self.wait_calls == 1:
            raise KeyboardInterrupt
        return self.process.wait()


@pytest.mark.unit_integration
def test_interrupt_waits_for_child(monkeypatch, caplog):
    """Test Ctrl+C keeps waiting and returns the child's own exit code."""
    monkeypatch.setattr(
        "recording.implementations.ffmpeg_capture.subprocess.Popen", InterruptedOnce,
    )
    capture = FFmpegCapture(ffmpeg=sys.executable)

    with caplog.at_level("INFO"):
        exit_code = capture.run(
            [sys.executable, "-c", "import sys, time; time.sleep(0.2); sys.exit(4)"],
        )

    assert exit_code == 4
    assert "waiting for ffmpeg to finalize" in caplog.text
