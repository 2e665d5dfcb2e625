from __future__ import annotations

from typing import Sequence


class ConnectorError(Exception):
    """Base class for usb-serial-connect failures."""


class NoDeviceFound(ConnectorError):
    """No device node matched any of the search patterns."""

    def __init__(self, patterns: Sequence[str]) -> None:
        self.patterns = list(patterns)
        super().__init__(f"No serial device found matching: {', '.join(self.patterns)}")


class TerminalLaunchFailed(ConnectorError):
    """The terminal program is missing or could not be started."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        self.command = list(command)
        super().__init__(f"Failed to launch terminal '{self.command[0]}': {reason}")


class ConfigError(ConnectorError):
    """Config file could not be parsed or holds values of the wrong type."""
