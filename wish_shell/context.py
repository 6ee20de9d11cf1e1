"""
CommandContext - state shared by built-ins and the external runner.

The context replaces process-wide globals: the search path, the streams
errors are reported on, and the pending exit request all travel in one
object that the Shell creates at startup and threads through every call.
"""

from dataclasses import dataclass, field
import sys
from typing import TextIO

from .path_manager import PathManager


@dataclass
class CommandContext:
    """
    Encapsulates the interpreter state a command may read or change.

    Example:
        >>> ctx = CommandContext(path_manager=PathManager(['/usr/bin']))
        >>> ctx.path_manager.get_search_path()
        ['/usr/bin']
        >>> ctx.request_exit()
        >>> ctx.exit_requested
        True
    """

    path_manager: PathManager = field(default_factory=PathManager)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)

    # Set by the exit built-in; the current line still runs to completion
    exit_requested: bool = False

    def request_exit(self) -> None:
        """Ask the shell to stop once the current line has finished."""
        self.exit_requested = True
