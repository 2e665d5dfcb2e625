"""
Locate USB-serial device nodes by globbing the device directory.
"""

from __future__ import annotations

import glob
import logging
import platform
from typing import Iterable, List, Optional, Tuple

from serial.tools import list_ports  # type: ignore

from .errors import NoDeviceFound

_logger = logging.getLogger(__name__)


def default_patterns(system: Optional[str] = None) -> List[str]:
    """Glob patterns for USB-serial device nodes on the given (or current) platform."""
    system = (system or platform.system()).lower()

    if system == "linux":
        # FTDI/CP210x adapters show up as ttyUSB, CDC-ACM boards (Uno, Leonardo) as ttyACM
        return ["/dev/ttyUSB*", "/dev/ttyACM*"]

    # macOS, and a reasonable guess for the BSDs
    return ["/dev/tty.usb*"]


def candidate_devices(patterns: Iterable[str]) -> List[str]:
    """
    Collect every device node matching any of the patterns.

    Args:
        patterns: Shell-style glob patterns, e.g. "/dev/tty.usb*"

    Returns:
        Matching paths without duplicates, in plain lexical order
    """
    found = set()
    for pattern in patterns:
        matches = glob.glob(pattern)
        _logger.debug("pattern %s matched %d node(s)", pattern, len(matches))
        found.update(matches)
    return sorted(found)


def find_device(patterns: Iterable[str]) -> str:
    """
    Pick the device to connect to: the lexically-first match.

    Args:
        patterns: Shell-style glob patterns to search

    Returns:
        Path of the selected device node

    Raises:
        NoDeviceFound: If no node matches
    """
    patterns = list(patterns)
    devices = candidate_devices(patterns)
    if not devices:
        raise NoDeviceFound(patterns)

    device = devices[0]
    if len(devices) > 1:
        _logger.warning("Multiple serial devices found, using %s (ignoring %s)",
                        device, ", ".join(devices[1:]))
    else:
        _logger.info("Using serial device %s", device)
    return device


def describe_devices(paths: Iterable[str]) -> List[Tuple[str, str]]:
    """Pair each path with the description pyserial reports for it, "n/a" when unknown."""
    known = {port_info.device: port_info.description for port_info in list_ports.comports()}
    return [(path, known.get(path) or "n/a") for path in paths]
