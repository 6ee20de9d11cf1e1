"""
Shell - the read loop.

Reads lines either interactively (printing a prompt before each one) or
from a batch file, and hands each non-blank line to a LineExecutor until
input runs out or an `exit` is executed.
"""

import logging
import sys
from typing import Iterable, Optional, TextIO

from .config import ShellConfig
from .context import CommandContext
from .exceptions import StartupError
from .executor import LineExecutor
from .parser import WHITESPACE
from .path_manager import PathManager
from .runner import Spawner

logger = logging.getLogger(__name__)


class Shell:
    """
    A wish interpreter instance.

    Example:
        >>> shell = Shell()
        >>> shell.execute("ls > listing.txt & pwd")
        False
    """

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        spawner: Optional[Spawner] = None,
    ):
        self.config = config or ShellConfig()
        self.stdin = stdin or sys.stdin
        self.context = CommandContext(
            path_manager=PathManager(self.config.default_search_path),
            stdout=stdout or sys.stdout,
            stderr=stderr or sys.stderr,
        )
        self.executor = LineExecutor(self.context, spawner)

    @property
    def path_manager(self) -> PathManager:
        return self.context.path_manager

    def execute(self, line: str) -> bool:
        """Execute one line; True means the shell should stop."""
        return self.executor.execute_line(line)

    def run_interactive(self) -> int:
        """Read from stdin with a prompt until EOF or exit."""
        return self._loop(self.stdin, interactive=True)

    def run_batch(self, script_path: str) -> int:
        """
        Run the lines of a script file without a prompt.

        Raises:
            StartupError: If the file cannot be opened
        """
        try:
            script = open(script_path, 'r', errors='surrogateescape')
        except OSError as e:
            raise StartupError(f"cannot open {script_path}: {e}") from e
        with script:
            return self._loop(script, interactive=False)

    def _loop(self, source: TextIO, interactive: bool) -> int:
        for line in self._read_lines(source, interactive):
            line = line.strip(WHITESPACE)
            if not line:
                continue
            if self.execute(line):
                logger.debug("exit requested")
                break
        return 0

    def _read_lines(self, source: TextIO, interactive: bool) -> Iterable[str]:
        while True:
            if interactive:
                self.context.stdout.write(self.config.prompt)
                self.context.stdout.flush()
            line = source.readline()
            if not line:
                return
            yield line
