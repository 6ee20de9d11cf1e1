"""Search path and working directory management for wish-shell.

This module provides the PathManager class which handles:
- The ordered list of directories used to find external commands
- Resolving a bare command name to an executable file
- Changing the process working directory
"""

import logging
import os
from typing import Iterator, List, Optional, Sequence

from .exceptions import BuiltinUsageError

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_PATH = ["/bin"]


class PathManager:
    """Manages the command search path and working directory.

    The search path is owned by one PathManager rather than by module
    globals, so each Shell (and each test) gets its own.

    Attributes:
        search_path: Directories consulted in order by resolve()
    """

    def __init__(self, search_path: Optional[Sequence[str]] = None):
        """Initialize the path manager.

        Args:
            search_path: Initial directories (default: DEFAULT_SEARCH_PATH)
        """
        if search_path is None:
            search_path = DEFAULT_SEARCH_PATH
        self.search_path: List[str] = list(search_path)

    def set_search_path(self, paths: Sequence[str]) -> None:
        """Replace the search path.

        An empty sequence is allowed and disables external commands until
        the path is set again. Duplicates are kept as given.

        Args:
            paths: New directories, highest priority first
        """
        self.search_path = list(paths)
        logger.debug("search path set to %s", self.search_path)

    def get_search_path(self) -> List[str]:
        """Return a copy of the current search path."""
        return list(self.search_path)

    def is_empty(self) -> bool:
        """Check whether external command resolution is disabled."""
        return not self.search_path

    def candidates(self, name: str) -> Iterator[str]:
        """Yield every executable ``directory + "/" + name`` in path order.

        Relative directories are taken relative to the current working
        directory at the time of the call. Paths the OS cannot represent
        (for example ones holding a NUL byte) are skipped.

        Args:
            name: Command name as typed by the user
        """
        for directory in self.search_path:
            candidate = directory + "/" + name
            try:
                executable = os.access(candidate, os.X_OK)
            except ValueError:
                continue
            if executable:
                yield candidate

    def resolve(self, name: str) -> Optional[str]:
        """Resolve a command name to an executable path.

        The first directory whose ``directory + "/" + name`` is executable
        wins.

        Args:
            name: Command name as typed by the user

        Returns:
            Path of the executable, or None if no directory has one

        Examples:
            With search_path=['/usr/bin', '/bin']:
                resolve('ls') -> '/usr/bin/ls'  (if present in both)
            With search_path=[]:
                resolve('ls') -> None
        """
        candidate = next(self.candidates(name), None)
        logger.debug("resolved %s -> %s", name, candidate)
        return candidate

    def change_directory(self, path: str) -> None:
        """Change the process working directory.

        Args:
            path: New directory, absolute or relative to the current one

        Raises:
            BuiltinUsageError: If the directory cannot be entered
        """
        try:
            os.chdir(path)
        except (OSError, ValueError) as e:
            raise BuiltinUsageError("cd", str(e)) from e
        logger.debug("working directory is now %s", os.getcwd())

    def get_cwd(self) -> str:
        """Get the current working directory."""
        return os.getcwd()
