"""
External command launching.

ExternalRunner turns a parsed argument list into a running child process:
resolve the name against the search path, bind the redirection file to the
child's stdout and stderr, start it, and hand back a handle without waiting.
How a child is actually created is delegated to a Spawner so tests and other
platforms can substitute their own.
"""

from abc import ABC, abstractmethod
import logging
import subprocess
from typing import Any, BinaryIO, List, Optional

from .context import CommandContext
from .exceptions import (
    ERROR_MESSAGE,
    CommandNotFoundError,
    ExecutionError,
    LaunchError,
    RedirectionError,
)

logger = logging.getLogger(__name__)


class Spawner(ABC):
    """Creates child processes and waits for them."""

    @abstractmethod
    def spawn(self, executable: str, args: List[str],
              output: Optional[BinaryIO] = None) -> Any:
        """
        Start a child without waiting for it.

        Args:
            executable: Resolved path of the program
            args: Full argument list; args[0] is the name the user typed
            output: File receiving both stdout and stderr, or None to
                inherit the shell's own streams

        Returns:
            A handle accepted by wait()

        Raises:
            OSError: If the child cannot be started
        """

    @abstractmethod
    def wait(self, handle: Any) -> int:
        """Block until the child behind handle exits; return its status."""


class SubprocessSpawner(Spawner):
    """Spawner backed by subprocess.Popen"""

    def spawn(self, executable, args, output=None):
        return subprocess.Popen(
            args,
            executable=executable,
            stdout=output,
            stderr=output,
            close_fds=True,
        )

    def wait(self, handle):
        return handle.wait()


class ExternalRunner:
    """
    Launches external commands for one shell.

    Example:
        >>> runner = ExternalRunner(CommandContext())
        >>> handle = runner.launch(['ls', '-l'], 'listing.txt')
        >>> runner.wait(handle)
        0
    """

    def __init__(self, context: CommandContext, spawner: Optional[Spawner] = None):
        self.context = context
        self.spawner = spawner or SubprocessSpawner()

    def launch(self, args: List[str], redirect: Optional[str] = None) -> Any:
        """
        Start args[0] as a child process and return its handle.

        The redirection target, when given, is created or truncated before
        the name is resolved, and its stdout/stderr both go there. Each
        executable candidate is tried in search path order until one starts.
        If none does and a target is open, the generic error message is
        written into the target and the raised error is marked reported.
        The shell's own copy of the file is closed once the child holds it.

        Raises:
            CommandNotFoundError: Empty search path or no executable found
            RedirectionError: The target cannot be opened for writing
            LaunchError: Every candidate was refused by the operating system
        """
        name = args[0]
        path_manager = self.context.path_manager
        if path_manager.is_empty():
            raise CommandNotFoundError(name)

        output = None
        if redirect is not None:
            try:
                output = open(redirect, 'wb')
            except (OSError, ValueError) as e:
                raise RedirectionError(redirect, str(e)) from e

        try:
            return self._spawn_first(name, args, output)
        except ExecutionError as e:
            if output is not None:
                output.write(ERROR_MESSAGE.encode())
                e.reported = True
            raise
        finally:
            if output is not None:
                output.close()

    def _spawn_first(self, name: str, args: List[str], output: Optional[BinaryIO]) -> Any:
        last_error = None
        for executable in self.context.path_manager.candidates(name):
            try:
                handle = self.spawner.spawn(executable, args, output)
            except (OSError, ValueError) as e:
                logger.debug("cannot start %s: %s", executable, e)
                last_error = e
                continue
            logger.debug("launched %s as %r", executable, handle)
            return handle

        if last_error is not None:
            raise LaunchError(name, last_error) from last_error
        raise CommandNotFoundError(name)

    def wait(self, handle: Any) -> int:
        """Wait for a launched child; the status is informational only."""
        status = self.spawner.wait(handle)
        logger.debug("%r exited with status %s", handle, status)
        return status
