"""
Run a terminal program against a serial device.

The terminal owns the controlling tty until the user quits it; we just wait
for it and hand back its exit code.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
import sys
from typing import List

from .errors import TerminalLaunchFailed

_logger = logging.getLogger(__name__)

BAUD_RATE: int = 57600
DEFAULT_TERMINAL: str = "screen"

# pyserial ships its own terminal, usable where screen isn't installed
MINITERM: str = "miniterm"


def build_command(program: str, device: str, baud: int = BAUD_RATE) -> List[str]:
    """
    Build the argv for the terminal session.

    Args:
        program: Terminal program, optionally with leading options ("screen -U")
                 or "miniterm" for pyserial's built-in terminal
        device: Serial device path
        baud: Baud rate

    Returns:
        Command line as a list: program argv + [device, baud]
    """
    if program.strip() == MINITERM:
        argv = [sys.executable, "-m", "serial.tools.miniterm"]
    else:
        try:
            argv = shlex.split(program)
        except ValueError as e:
            raise TerminalLaunchFailed([program], str(e)) from e
    if not argv:
        raise TerminalLaunchFailed([program], "empty terminal program")
    return argv + [device, str(baud)]


def launch(program: str, device: str, baud: int = BAUD_RATE) -> int:
    """
    Start the terminal in the foreground and wait for it to exit.

    Args:
        program: Terminal program (see build_command)
        device: Serial device path
        baud: Baud rate

    Returns:
        Exit code of the terminal program, 128+N if it was killed by signal N

    Raises:
        TerminalLaunchFailed: If the program is not on PATH or cannot be spawned
    """
    cmd = build_command(program, device, baud)

    if shutil.which(cmd[0]) is None:
        raise TerminalLaunchFailed(cmd, "program not found")

    _logger.info("Running %s", " ".join(shlex.quote(arg) for arg in cmd))
    try:
        returncode = subprocess.call(cmd)
    except OSError as e:
        raise TerminalLaunchFailed(cmd, str(e)) from e

    _logger.debug("%s exited with %d", cmd[0], returncode)
    if returncode < 0:
        # killed by signal N: report it the way a shell does
        return 128 - returncode
    return returncode
