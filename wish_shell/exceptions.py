"""
Custom exception hierarchy for wish-shell.

Every failure the user can trigger is reported with the same fixed message
(see ERROR_MESSAGE). The exception classes exist so that the code raising an
error and the code reporting it stay separate, and so that debug logging can
say what actually went wrong.

Usage:
    from wish_shell.exceptions import ShellError, report_error

    try:
        runner.launch(args, redirect)
    except ShellError as e:
        logger.debug("launch failed: %s", e)
        report_error(stderr)
"""

from typing import Optional, TextIO

ERROR_MESSAGE = "An error has occurred\n"


def report_error(stream: TextIO) -> None:
    """Write the generic error message to a stream and flush it."""
    stream.write(ERROR_MESSAGE)
    stream.flush()


class ShellError(Exception):
    """
    Base class for all shell errors.

    Attributes:
        message: Detail for logs; never shown to the user
        exit_code: Status to use if the error ends the process (default: 1)
        reported: Whether the generic message was already written
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code
        # True once the generic message went to the command's own output
        self.reported = False

    def __str__(self):
        return self.message


# =============================================================================
# Parse Errors
# =============================================================================

class ParseError(ShellError):
    """Raised when a sub-command cannot be parsed."""

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message)
        self.text = text


class RedirectionError(ParseError):
    """
    Raised for a malformed or unusable redirection target.

    Example:
        raise RedirectionError("ls > a > b", "multiple redirection markers")
    """

    def __init__(self, text: str, reason: str):
        super().__init__(f"bad redirection in {text!r}: {reason}", text)
        self.reason = reason


class EmptyCommandError(ParseError):
    """Raised when a sub-command has no command word."""

    def __init__(self, text: str):
        super().__init__(f"no command in {text!r}", text)


# =============================================================================
# Command Errors
# =============================================================================

class BuiltinUsageError(ShellError):
    """
    Raised when a built-in is called with the wrong operands or fails.

    Example:
        raise BuiltinUsageError("cd", "expected exactly one operand")
    """

    def __init__(self, command: str, reason: str):
        super().__init__(f"{command}: {reason}")
        self.command = command
        self.reason = reason


class ExecutionError(ShellError):
    """Base class for errors launching an external command."""

    def __init__(self, message: str, command: Optional[str] = None):
        super().__init__(message)
        self.command = command


class CommandNotFoundError(ExecutionError):
    """Raised when no search path directory holds an executable of that name."""

    def __init__(self, command: str):
        super().__init__(f"{command}: command not found", command)


class LaunchError(ExecutionError):
    """Raised when the operating system refuses to start the child."""

    def __init__(self, command: str, cause: Exception):
        super().__init__(f"{command}: {cause}", command)
        self.cause = cause


# =============================================================================
# Startup Errors
# =============================================================================

class StartupError(ShellError):
    """
    Raised before the read loop starts: bad argument count or an
    unreadable batch file. Always terminates the process.
    """


__all__ = [
    'ERROR_MESSAGE',
    'report_error',
    'ShellError',
    'ParseError',
    'RedirectionError',
    'EmptyCommandError',
    'BuiltinUsageError',
    'ExecutionError',
    'CommandNotFoundError',
    'LaunchError',
    'StartupError',
]
