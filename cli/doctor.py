"""
Requirements Check (--test)

Checks the environment a recording needs and prints one line per check.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from config.user_config import UserConfig
from core.errors import ScreencastError
from core.platform import Platform, detect_platform
from devices.constants import DARWIN_INPUT_FORMAT, LINUX_INPUT_FORMATS, DeviceKind
from devices.interfaces.device_lister_interface import DeviceListerInterface
from recording.interfaces.capture_runner_interface import CaptureRunnerInterface

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Outcome of one requirement check"""

    name: str
    ok: bool
    detail: str


def required_input_formats(platform: Platform) -> list[str]:
    """ffmpeg input formats a platform's recordings use"""
    if platform is Platform.DARWIN:
        return [DARWIN_INPUT_FORMAT]
    return [LINUX_INPUT_FORMATS[kind] for kind in DeviceKind]


def check_config(config_path: Optional[Path]) -> CheckResult:
    """Config file is absent (defaults apply) or valid"""
    try:
        config = UserConfig(config_path, create=False)
    except ScreencastError as e:
        return CheckResult("Config file", False, str(e))
    if config.config_path.exists():
        return CheckResult("Config file", True, str(config.config_path))
    return CheckResult("Config file", True, f"{config.config_path} (not created yet, defaults)")


def run_checks(
    lister: DeviceListerInterface,
    capture: CaptureRunnerInterface,
    config_path: Optional[Path] = None,
) -> list[CheckResult]:
    """
    Run every requirement check.

    Args:
        lister: Device lister of the platform being checked
        capture: Capture runner (ffmpeg)
        config_path: Config file to validate (None = default location)

    Returns:
        One result per check, in display order
    """
    results = [CheckResult("Platform", True, lister.platform.value)]

    ffmpeg_ok = capture.is_available()
    results.append(
        CheckResult("ffmpeg", ffmpeg_ok, "installed" if ffmpeg_ok else "not found in PATH"),
    )

    if ffmpeg_ok:
        try:
            formats = capture.get_input_formats()
        except ScreencastError as e:
            logger.debug(f"Cannot read ffmpeg devices: {e}")
            formats = set()
        for input_format in required_input_formats(lister.platform):
            supported = input_format in formats
            results.append(
                CheckResult(
                    f"ffmpeg {input_format}",
                    supported,
                    "supported" if supported else "ffmpeg was built without this input",
                ),
            )

    for kind in DeviceKind:
        missing = lister.missing_tools(kind)
        tools = " / ".join(
            " or ".join(alternatives) for alternatives in lister.required_tools(kind)
        )
        if missing:
            results.append(
                CheckResult(f"{kind.title} listing", False, f"missing: {', '.join(missing)}"),
            )
        else:
            results.append(CheckResult(f"{kind.title} listing", True, tools))

    results.append(check_config(config_path))
    return results


def print_report(results: list[CheckResult], stream: Optional[TextIO] = None) -> bool:
    """
    Print check results as a table.

    Returns:
        True if every check passed
    """
    stream = stream or sys.stdout
    width = max(len(result.name) for result in results)
    for result in results:
        status = "OK" if result.ok else "FAIL"
        print(f"{result.name:<{width}}  {status:<4}  {result.detail}", file=stream)

    passed = all(result.ok for result in results)
    print("", file=stream)
    print(
        "All requirements met." if passed else "Some requirements are missing.",
        file=stream,
    )
    return passed


def platform_result() -> Optional[CheckResult]:
    """A failed Platform check when the OS is unsupported, else None"""
    try:
        detect_platform()
    except ScreencastError as e:
        return CheckResult("Platform", False, str(e))
    return None
