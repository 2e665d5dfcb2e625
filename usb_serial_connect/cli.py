from __future__ import annotations

import logging
import shlex
from typing import Optional

import click

from .config import DEFAULT_CONFIG_PATH, Settings, load_config
from .discovery import candidate_devices, describe_devices, find_device
from .errors import ConnectorError, NoDeviceFound
from .terminal import BAUD_RATE, build_command, launch

_logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.command()
@click.option("--config", "config_path", default=DEFAULT_CONFIG_PATH, show_default=True,
              help="TOML config file (missing file is fine)")
@click.option("-t", "--terminal", help="Terminal program to run, e.g. 'screen' or 'miniterm'")
@click.option("--list", "list_only", is_flag=True, help="List matching devices in selection order and exit")
@click.option("-n", "--dry-run", is_flag=True, help="Print the terminal command instead of running it")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: str, terminal: Optional[str], list_only: bool,
         dry_run: bool, verbose: bool) -> None:
    """Open a terminal on the first USB-serial device at 57600 baud.

    With no options, finds the first /dev/tty.usb* node (ttyUSB*/ttyACM* on
    Linux) and runs `screen DEVICE 57600`. Exits with the terminal's exit code.

    Examples:

      # Connect with screen
      usb-serial-connect

      # Use pyserial's miniterm instead
      usb-serial-connect -t miniterm

      # See which device would be picked
      usb-serial-connect --list
    """
    _setup_logging(verbose)

    try:
        settings = Settings.from_config(load_config(config_path), terminal=terminal)

        if list_only:
            devices = candidate_devices(settings.patterns)
            if not devices:
                raise NoDeviceFound(settings.patterns)
            for path, description in describe_devices(devices):
                click.echo(f"{path}\t{description}")
            return

        device = find_device(settings.patterns)

        if dry_run:
            click.echo(shlex.join(build_command(settings.terminal, device, BAUD_RATE)))
            return

        returncode = launch(settings.terminal, device, BAUD_RATE)
    except ConnectorError as e:
        raise click.ClickException(str(e))

    ctx.exit(returncode)


if __name__ == "__main__":
    main()
