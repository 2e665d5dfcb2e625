from __future__ import annotations

from pathlib import Path
from typing import Callable, List

import pytest


@pytest.fixture
def dev_dir(tmp_path: Path) -> Path:
    """Stand-in for /dev: device nodes are plain empty files."""
    d = tmp_path / "dev"
    d.mkdir()
    return d


@pytest.fixture
def make_nodes(dev_dir: Path) -> Callable[..., List[str]]:
    """Create empty files under dev_dir and return their paths."""

    def _make(*names: str) -> List[str]:
        paths = []
        for name in names:
            node = dev_dir / name
            node.touch()
            paths.append(str(node))
        return paths

    return _make


class CallRecorder:
    """Replacement for subprocess.call that records argv and returns a fixed code."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: List[List[str]] = []

    def __call__(self, cmd, *args, **kwargs) -> int:
        self.calls.append(list(cmd))
        return self.returncode


@pytest.fixture
def fake_terminal(monkeypatch):
    """Pretend every program is on PATH and capture what gets run."""
    recorder = CallRecorder()
    monkeypatch.setattr("usb_serial_connect.terminal.shutil.which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr("usb_serial_connect.terminal.subprocess.call", recorder)
    return recorder
