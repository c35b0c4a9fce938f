"""
Interactive Device Prompt

Asks the user to pick a device when a source flag is given without a
number and more than one device of that kind exists.

The menu goes to stderr so stdout only ever carries command output
(the --dry command line, device lists).
"""

import logging
import sys
from typing import Callable, Optional, Sequence, TextIO

from core.errors import DeviceNotFoundError, SelectionAbortedError
from devices.constants import DeviceKind
from devices.models.capture_device import CaptureDevice


def read_answer(prompt: str) -> str:
    """input() writing its prompt to stderr"""
    print(prompt, end="", file=sys.stderr, flush=True)
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\n")


class DevicePrompt:
    """
    Numbered device menu.

    Enter picks the first device, anything that is not a listed number is
    rejected and asked again, end of input aborts.

    Usage:
        prompt = DevicePrompt()
        screen = prompt.choose(DeviceKind.SCREEN, lister.list_screens())
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = read_answer,
        stream: Optional[TextIO] = None,
        interactive: Optional[bool] = None,
    ):
        """
        Args:
            input_func: Reads one answer (stdin by default)
            stream: Where the menu is written (None = stderr)
            interactive: Ask at all (None = only when stdin is a terminal)
        """
        self.logger = logging.getLogger(__name__)
        self._input = input_func
        self._stream = stream
        self.interactive = sys.stdin.isatty() if interactive is None else interactive

    def choose(self, kind: DeviceKind, devices: Sequence[CaptureDevice]) -> CaptureDevice:
        """
        Pick one device of a kind.

        Args:
            kind: Kind being chosen (for the menu text)
            devices: Candidates, in listing order

        Returns:
            Selected device

        Raises:
            DeviceNotFoundError: No candidates at all
            SelectionAbortedError: Input closed before a valid answer
        """
        if not devices:
            raise DeviceNotFoundError(f"No {kind.value} devices found")

        if len(devices) == 1:
            return devices[0]

        default = devices[0]
        if not self.interactive:
            self.logger.warning(
                f"Several {kind.value} devices found and stdin is not a terminal, "
                f"using {default.label}",
            )
            return default

        self._write(f"Available {kind.title.lower()}:")
        for device in devices:
            self._write(f"  {device.label}")

        while True:
            try:
                answer = self._input(f"Select {kind.value} [{default.index}]: ").strip()
            except EOFError:
                raise SelectionAbortedError(f"No {kind.value} selected")

            if not answer:
                return default

            if answer.isdigit():
                for device in devices:
                    if device.index == int(answer):
                        return device

            choices = ", ".join(str(device.index) for device in devices)
            self._write(f"Invalid choice {answer!r}, enter one of: {choices}")

    def _write(self, line: str) -> None:
        print(line, file=self._stream or sys.stderr)
