"""
Device Selection

Decides which devices to record from command-line flags and the user
config, and resolves those requests against the devices actually present.

Rules:
- Any of -s/-a/-c given: exactly the flagged sources are recorded
- None given: the record_* knobs of the config file apply
- A flag without a number uses the configured device number if there is
  one, otherwise the only device, otherwise the user is asked
"""

import argparse
import logging
from typing import Optional

from cli.arguments import PICK_DEVICE, DeviceRequest
from cli.prompts import DevicePrompt
from config.user_config import UserConfig
from devices.constants import DeviceKind
from devices.interfaces.device_lister_interface import DeviceListerInterface
from recording.models.capture_request import CaptureSelection

logger = logging.getLogger(__name__)


def configured_device(config: UserConfig, kind: DeviceKind) -> Optional[int]:
    return {
        DeviceKind.SCREEN: config.screen_device,
        DeviceKind.AUDIO: config.audio_device,
        DeviceKind.CAMERA: config.camera_device,
    }[kind]


def configured_sources(config: UserConfig) -> list[DeviceKind]:
    enabled = {
        DeviceKind.SCREEN: config.record_screen,
        DeviceKind.AUDIO: config.record_audio,
        DeviceKind.CAMERA: config.record_camera,
    }
    return [kind for kind in DeviceKind if enabled[kind]]


def build_requests(
    args: argparse.Namespace,
    config: UserConfig,
) -> dict[DeviceKind, DeviceRequest]:
    """
    Work out which sources to record and which device each should use.

    Returns:
        Device number or PICK_DEVICE per source to record
    """
    flagged = {
        kind: getattr(args, kind.value)
        for kind in DeviceKind
        if getattr(args, kind.value) is not None
    }

    if flagged:
        requests = flagged
    else:
        requests = {kind: PICK_DEVICE for kind in configured_sources(config)}
        logger.info(
            f"No source flags, using config: {', '.join(k.value for k in requests) or 'nothing'}",
        )

    for kind, request in requests.items():
        if request == PICK_DEVICE:
            device = configured_device(config, kind)
            if device is not None:
                requests[kind] = device

    return requests


class DeviceSelector:
    """
    Resolves device requests into a CaptureSelection.

    Usage:
        selector = DeviceSelector(lister, DevicePrompt())
        selection = selector.resolve({DeviceKind.SCREEN: 0, DeviceKind.AUDIO: PICK_DEVICE})
    """

    def __init__(self, lister: DeviceListerInterface, prompt: DevicePrompt):
        self.logger = logging.getLogger(__name__)
        self.lister = lister
        self.prompt = prompt

    def resolve(self, requests: dict[DeviceKind, DeviceRequest]) -> CaptureSelection:
        """
        Look up every requested device.

        Raises:
            DeviceNotFoundError: Requested number missing, or no device of a kind
            ToolNotFoundError: Listing tool for a requested kind missing
            SelectionAbortedError: User aborted a prompt
        """
        selection = CaptureSelection()

        # Fixed order so prompts always come screen, audio, camera
        for kind in DeviceKind:
            if kind not in requests:
                continue

            request = requests[kind]
            if request == PICK_DEVICE:
                device = self.prompt.choose(kind, self.lister.list_devices(kind))
            else:
                device = self.lister.get_device(kind, int(request))

            self.logger.info(f"Selected {kind.value}: {device.label}")
            setattr(selection, kind.value, device)

        return selection
