from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

try:  # Python 3.11+
    import tomllib as _toml
except ImportError:  # pragma: no cover
    import tomli as _toml  # type: ignore

from .discovery import default_patterns
from .errors import ConfigError
from .terminal import DEFAULT_TERMINAL

_logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH: str = "usb-serial-connect.toml"


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> dict:
    """Load configuration from TOML file. A missing file means defaults."""
    try:
        with open(config_path, "rb") as f:
            return _toml.load(f)
    except FileNotFoundError:
        _logger.debug("Config file %s not found, using defaults", config_path)
        return {}
    except _toml.TOMLDecodeError as e:
        raise ConfigError(f"Failed to parse {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e


@dataclass(frozen=True)
class Settings:
    """Knobs that may come from the config file. Baud rate is not one of them."""

    patterns: List[str] = field(default_factory=default_patterns)
    terminal: str = DEFAULT_TERMINAL

    @classmethod
    def from_config(cls, config: dict, terminal: Optional[str] = None) -> "Settings":
        """
        Build settings from a parsed config dict.

        Args:
            config: Parsed TOML, possibly empty
            terminal: Command-line override for the terminal program

        Raises:
            ConfigError: If a value has the wrong type
        """
        serial_cfg = config.get("serial", {})
        terminal_cfg = config.get("terminal", {})
        for name, section in (("serial", serial_cfg), ("terminal", terminal_cfg)):
            if not isinstance(section, dict):
                raise ConfigError(f"[{name}] must be a table")

        patterns = serial_cfg.get("patterns")
        if patterns is None:
            patterns = default_patterns()
        elif (not isinstance(patterns, list) or not patterns
              or not all(isinstance(p, str) and p for p in patterns)):
            raise ConfigError("serial.patterns must be a non-empty list of strings")

        program = terminal or terminal_cfg.get("program", DEFAULT_TERMINAL)
        if not isinstance(program, str) or not program.strip():
            raise ConfigError("terminal.program must be a non-empty string")

        return cls(patterns=list(patterns), terminal=program)
