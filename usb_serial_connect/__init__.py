"""USB serial connect package.

Finds the first USB-serial device node and opens a terminal program on it.
"""

__all__ = [
    "BAUD_RATE",
    "ConnectorError",
    "NoDeviceFound",
    "TerminalLaunchFailed",
    "find_device",
    "candidate_devices",
    "launch",
]

from .errors import ConnectorError, NoDeviceFound, TerminalLaunchFailed
from .discovery import candidate_devices, find_device
from .terminal import BAUD_RATE, launch

__version__ = "0.1.0"
