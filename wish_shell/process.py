"""Process class for running one parsed sub-command as a built-in"""

from typing import Callable, List, Optional

from .context import CommandContext
from .exceptions import CommandNotFoundError


class Process:
    """Represents a single built-in invocation"""

    def __init__(
        self,
        command: str,
        args: List[str],
        context: Optional[CommandContext] = None,
        executor: Optional[Callable[['Process'], int]] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name
            args: Operands (the words after the command name)
            context: CommandContext shared with the rest of the shell
            executor: Callable that executes the command
        """
        self.command = command
        self.args = args
        self.context = context or CommandContext()
        self.executor = executor
        self.exit_code = 0

    @property
    def path_manager(self):
        return self.context.path_manager

    def execute(self) -> int:
        """
        Execute the process

        Returns:
            Exit code (0 for success)

        Raises:
            CommandNotFoundError: If no executor is attached
            ShellError: Whatever the executor raises on misuse
        """
        if self.executor is None:
            raise CommandNotFoundError(self.command)

        self.exit_code = self.executor(self)
        return self.exit_code

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
