"""
screencast command-line entry point

Linear flow:
    parse arguments -> load config -> check platform and tools ->
    list devices -> prompt if needed -> build command -> run or print it

Every ScreencastError ends here as "Error: <message>" on stderr and the
fixed failure exit code.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from cli.arguments import parse_args
from cli.doctor import platform_result, print_report, run_checks
from cli.prompts import DevicePrompt
from cli.selection import DeviceSelector, build_requests
from config.settings import (
    CAPTURE_MODE,
    DEVICE_MODE,
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_OK,
    FFMPEG_BINARY,
    LOG_FORMAT,
    LOG_LEVEL,
)
from config.user_config import UserConfig
from core.errors import ConfigError, ScreencastError
from devices.constants import DeviceKind
from devices.factory import DeviceFactory
from devices.interfaces.device_lister_interface import DeviceListerInterface
from recording.constants import CameraPosition
from recording.controllers.capture_session import CaptureSession
from recording.controllers.command_builder import CaptureCommandBuilder
from recording.factory import RecordingFactory
from recording.interfaces.capture_runner_interface import CaptureRunnerInterface
from recording.models.capture_request import CaptureOptions
from recording.utils.recording_utils import generate_filename

logger = logging.getLogger(__name__)


def setup_logging(verbosity: int = 0) -> None:
    """
    Configure logging on stderr.

    Args:
        verbosity: Number of -v flags (1 = INFO, 2+ = DEBUG)
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, LOG_LEVEL, logging.WARNING)

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def list_devices(lister: DeviceListerInterface, kinds: Sequence[DeviceKind]) -> int:
    """
    Print the devices of each kind on stdout.

    A missing listing tool is reported under its heading and the other
    kinds are still listed.

    Returns:
        Exit code (failure if any kind could not be listed)
    """
    exit_code = EXIT_OK
    for kind in kinds:
        print(f"{kind.title}:")
        try:
            devices = lister.list_devices(kind)
        except ScreencastError as e:
            print(f"  (unavailable: {e})")
            exit_code = EXIT_FAILURE
            continue

        if not devices:
            print("  (none found)")
        for device in devices:
            print(f"  {device.label}")
    return exit_code


def build_options(args: argparse.Namespace, config: UserConfig) -> CaptureOptions:
    """Merge command-line flags over config values"""
    if args.output is not None:
        output_file = args.output.expanduser()
    else:
        output_file = generate_filename(
            config.output_dir,
            config.filename_format,
            args.extension or config.extension,
        )

    def pick(flag_value: Optional[str], config_value: str) -> str:
        return config_value if flag_value is None else flag_value

    return CaptureOptions(
        output_file=output_file,
        screen_args=pick(args.sargs, config.screen_args),
        audio_args=pick(args.aargs, config.audio_args),
        camera_args=pick(args.cargs, config.camera_args),
        output_args=pick(args.oargs, config.output_args),
        camera_position=CameraPosition(config.camera_position),
        camera_margin=config.camera_margin,
        ffmpeg=config.ffmpeg,
    )


def requested_listing(args: argparse.Namespace) -> list[DeviceKind]:
    """Kinds asked for by --list/--slist/--alist/--clist"""
    if args.list:
        return list(DeviceKind)
    flags = {
        DeviceKind.SCREEN: args.slist,
        DeviceKind.AUDIO: args.alist,
        DeviceKind.CAMERA: args.clist,
    }
    return [kind for kind in DeviceKind if flags[kind]]


def _run_test(
    args: argparse.Namespace,
    lister: Optional[DeviceListerInterface],
    capture: Optional[CaptureRunnerInterface],
) -> int:
    # Never create the file here; an invalid one is reported by the Config check
    try:
        ffmpeg = UserConfig(args.config, create=False).ffmpeg
    except ConfigError:
        ffmpeg = FFMPEG_BINARY

    if lister is None:
        failed = platform_result()
        if failed is not None:
            print_report([failed])
            return EXIT_FAILURE
        lister = DeviceFactory.create_lister(mode=DEVICE_MODE, ffmpeg=ffmpeg)

    if capture is None:
        capture = RecordingFactory.create_capture(mode=CAPTURE_MODE, ffmpeg=ffmpeg)
    results = run_checks(lister, capture, config_path=args.config)
    return EXIT_OK if print_report(results) else EXIT_FAILURE


def _run(
    args: argparse.Namespace,
    lister: Optional[DeviceListerInterface],
    capture: Optional[CaptureRunnerInterface],
    prompt: Optional[DevicePrompt],
) -> int:
    if args.test:
        return _run_test(args, lister, capture)

    config = UserConfig(args.config)

    if lister is None:
        lister = DeviceFactory.create_lister(mode=DEVICE_MODE, ffmpeg=config.ffmpeg)

    listing = requested_listing(args)
    if listing:
        return list_devices(lister, listing)

    requests = build_requests(args, config)
    selection = DeviceSelector(lister, prompt or DevicePrompt()).resolve(requests)
    options = build_options(args, config)

    if capture is None:
        capture = RecordingFactory.create_capture(mode=CAPTURE_MODE, ffmpeg=config.ffmpeg)
    session = CaptureSession(CaptureCommandBuilder(lister.platform), capture)

    if args.dry:
        print(session.dry_run(selection, options))
        return EXIT_OK

    print(f"Recording to {options.output_file} (press q or Ctrl+C to stop)", file=sys.stderr)
    return session.record(selection, options)


def run(
    argv: Optional[Sequence[str]] = None,
    lister: Optional[DeviceListerInterface] = None,
    capture: Optional[CaptureRunnerInterface] = None,
    prompt: Optional[DevicePrompt] = None,
) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name (None = sys.argv)
        lister: Device lister to use (None = for this OS)
        capture: Capture runner to use (None = ffmpeg)
        prompt: Device prompt to use (None = stdin/stderr)

    Returns:
        Process exit code
    """
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        return _run(args, lister, capture, prompt)
    except ScreencastError as e:
        logger.debug("Failure details", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print("", file=sys.stderr)
        return EXIT_INTERRUPTED


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
