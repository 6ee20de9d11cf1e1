"""
LineExecutor - runs one input line.

A line goes through four steps:

1. split it into sub-commands on '&'
2. parse and dispatch each sub-command in order: built-ins run inline,
   external commands are launched and their handles collected
3. wait for every collected handle
4. report whether an exit was requested

Errors in one sub-command are reported and that sub-command is dropped;
siblings that already started keep running and are still waited on.
"""

import logging
from typing import Any, List, Optional

from .builtins import get_builtin
from .context import CommandContext
from .exceptions import ShellError, report_error
from .parser import SubCommand, parse_subcommand, split_concurrent
from .process import Process
from .runner import ExternalRunner, Spawner

logger = logging.getLogger(__name__)


class LineExecutor:
    """Executes input lines against a shared CommandContext."""

    def __init__(self, context: CommandContext, spawner: Optional[Spawner] = None):
        self.context = context
        self.runner = ExternalRunner(context, spawner)

    def execute_line(self, line: str) -> bool:
        """
        Run every sub-command on a line and wait for the children.

        Args:
            line: Raw input line

        Returns:
            True if a valid exit was seen and the shell should stop
        """
        pending: List[Any] = []
        try:
            for text in split_concurrent(line):
                handle = self._dispatch(text)
                if handle is not None:
                    pending.append(handle)
        finally:
            self.wait_all(pending)
        return self.context.exit_requested

    def wait_all(self, handles: List[Any]) -> None:
        """Block until every handle has exited; statuses are discarded."""
        for handle in handles:
            self.runner.wait(handle)

    def _dispatch(self, text: str) -> Optional[Any]:
        """Run one sub-command. Returns a child handle for external commands."""
        try:
            subcommand = parse_subcommand(text)
            executor = get_builtin(subcommand.name)
            if executor is not None:
                self._run_builtin(subcommand, executor)
                return None
            return self.runner.launch(subcommand.args, subcommand.redirect)
        except ShellError as e:
            logger.debug("sub-command %r failed: %s", text, e)
            if not e.reported:
                report_error(self.context.stderr)
            return None

    def _run_builtin(self, subcommand: SubCommand, executor) -> int:
        # Built-ins ignore any redirection target
        process = Process(
            command=subcommand.name,
            args=subcommand.operands,
            context=self.context,
            executor=executor,
        )
        logger.debug("running built-in %r", process)
        return process.execute()
