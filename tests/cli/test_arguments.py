"""
Command-Line Argument Tests

To run:
    pytest tests/cli/test_arguments.py -v
"""

from pathlib import Path

import pytest

from cli.arguments import PICK_DEVICE, parse_args
from config.settings import EXIT_FAILURE

# =============================================================================
# SOURCE FLAG TESTS
# =============================================================================


@pytest.mark.unit
def test_no_flags():
    """Test sources are unset when no flag is given."""
    args = parse_args([])

    assert args.screen is None
    assert args.audio is None
    assert args.camera is None
    assert args.verbose == 0
    assert not args.dry


@pytest.mark.unit
def test_flags_without_number_ask():
    """Test a bare source flag means "pick a device"."""
    args = parse_args(["-s", "-a", "-c"])

    assert args.screen == PICK_DEVICE
    assert args.audio == PICK_DEVICE
    assert args.camera == PICK_DEVICE


@pytest.mark.unit
def test_bare_flag_before_other_flags():
    """Test a bare flag followed by another option still means "pick"."""
    args = parse_args(["-s", "--dry", "-c"])

    assert args.screen == PICK_DEVICE
    assert args.camera == PICK_DEVICE
    assert args.audio is None
    assert args.dry


@pytest.mark.unit
def test_glued_and_separate_numbers():
    """Test -s1 and -a 0 both give device numbers."""
    args = parse_args(["-s1", "-a", "0", "--camera=2"])

    assert args.screen == 1
    assert args.audio == 0
    assert args.camera == 2


@pytest.mark.unit
def test_extra_args_with_leading_dash():
    """Test argument strings starting with a dash are accepted with =."""
    args = parse_args(["-s", "--sargs=-framerate 30", "--oargs=-c:v libx264 -crf 23"])

    assert args.sargs == "-framerate 30"
    assert args.oargs == "-c:v libx264 -crf 23"


# =============================================================================
# OUTPUT FLAG TESTS
# =============================================================================


@pytest.mark.unit
def test_extension_and_output():
    """Test extension loses its dot and output becomes a path."""
    args = parse_args(["-e", ".mp4", "-o", "~/cast.mkv", "--dry"])

    assert args.extension == "mp4"
    assert args.output == Path("~/cast.mkv")
    assert args.dry


@pytest.mark.unit
def test_glued_extension():
    """Test -emp4 works like -e mp4."""
    assert parse_args(["-emp4"]).extension == "mp4"


@pytest.mark.unit
def test_listing_and_verbosity_flags():
    """Test information flags and stacked -v."""
    args = parse_args(["--slist", "--clist", "-vv"])

    assert args.slist and args.clist
    assert not args.alist and not args.list
    assert args.verbose == 2


# =============================================================================
# ERROR TESTS
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "argv",
    [["-sX"], ["-a", "-1x"], ["--bogus"], ["-e", "a/b"], ["-e", "tar.gz"]],
)
def test_invalid_arguments_exit_with_failure(argv, capsys):
    """Test usage errors exit with the failure code."""
    with pytest.raises(SystemExit) as exc_info:
        parse_args(argv)

    assert exc_info.value.code == EXIT_FAILURE
    assert "usage:" in capsys.readouterr().err


@pytest.mark.unit
def test_version(capsys):
    """Test --version prints the version and exits cleanly."""
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--version"])

    assert exc_info.value.code == 0
    assert "screencast" in capsys.readouterr().out
