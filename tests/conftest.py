"""
Pytest configuration and shared fixtures for wish-shell tests.

This module provides reusable test fixtures for:
- A recording spawner that launches nothing
- Temporary bin directories holding small executable scripts
- Captured output streams and ready-made shells
"""

import io
import os
import stat
from typing import Any, List, Optional

import pytest

from wish_shell.context import CommandContext
from wish_shell.path_manager import PathManager
from wish_shell.runner import Spawner
from wish_shell.shell import Shell


# ============================================================================
# Recording Spawner
# ============================================================================

class FakeHandle:
    """Stand-in for a child process handle."""

    def __init__(self, executable: str, args: List[str], output: Optional[Any]):
        self.executable = executable
        self.args = args
        self.output_name = getattr(output, 'name', None)
        self.waited = 0

    def __repr__(self):
        return f"FakeHandle({self.args!r})"


class RecordingSpawner(Spawner):
    """
    Spawner that records calls instead of creating processes.

    events is a flat list of ('spawn', args) and ('wait', args) tuples in
    the order they happened.
    """

    def __init__(self, fail_with: Optional[Exception] = None):
        self.events: List[tuple] = []
        self.handles: List[FakeHandle] = []
        self.fail_with = fail_with

    def spawn(self, executable, args, output=None):
        if self.fail_with is not None:
            raise self.fail_with
        handle = FakeHandle(executable, list(args), output)
        self.handles.append(handle)
        self.events.append(('spawn', handle.args))
        return handle

    def wait(self, handle):
        handle.waited += 1
        self.events.append(('wait', handle.args))
        return 0


# ============================================================================
# Helpers
# ============================================================================

def make_script(directory, name: str, body: str):
    """Create an executable /bin/sh script and return its path."""
    path = directory / name
    path.write_text("#!/bin/sh\n" + body + "\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def is_root() -> bool:
    return hasattr(os, 'geteuid') and os.geteuid() == 0


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """
    Run every test inside its own temporary working directory.

    cd tests change the real process directory; monkeypatch restores it.
    """
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def bin_dir(tmp_path):
    """
    Provides a directory of executable test scripts.

    Scripts:
        hello  - prints "hello" followed by its arguments
        both   - prints "out" on stdout and "err" on stderr
        stamp  - sleeps briefly, then appends its first argument to a file
                 named by its second argument
        fail   - exits with status 3
    """
    directory = tmp_path / "bin"
    directory.mkdir()
    make_script(directory, "hello", 'echo hello "$@"')
    make_script(directory, "both", "echo out\necho err 1>&2")
    make_script(directory, "stamp", 'sleep 0.2\necho "$1" >> "$2"')
    make_script(directory, "fail", "exit 3")
    return directory


@pytest.fixture
def capture_output():
    """
    Provides StringIO objects for capturing shell output.

    Returns:
        tuple: (stdout, stderr) StringIO objects
    """
    return io.StringIO(), io.StringIO()


@pytest.fixture
def recording_spawner():
    return RecordingSpawner()


@pytest.fixture
def context(bin_dir, capture_output):
    """CommandContext searching only bin_dir, with captured streams."""
    stdout, stderr = capture_output
    return CommandContext(
        path_manager=PathManager([str(bin_dir)]),
        stdout=stdout,
        stderr=stderr,
    )


@pytest.fixture
def shell(bin_dir, capture_output):
    """
    Provides a Shell that really launches processes, searching bin_dir.

    Example:
        def test_hello(shell, workdir):
            shell.execute("hello > out.txt")
            assert (workdir / "out.txt").read_text() == "hello\\n"
    """
    stdout, stderr = capture_output
    sh = Shell(stdout=stdout, stderr=stderr)
    sh.path_manager.set_search_path([str(bin_dir)])
    return sh
