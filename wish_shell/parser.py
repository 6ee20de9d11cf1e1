"""
Line splitting and sub-command parsing.

A line is a list of sub-commands separated by CONCURRENCY_MARKER. Each
sub-command is a list of whitespace separated words optionally followed by
REDIRECT_MARKER and a single file name:

    subcmd (& subcmd)*
    subcmd := word+ (> filename)?

There is no quoting or escaping; whitespace is the only word separator.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .exceptions import EmptyCommandError, RedirectionError

CONCURRENCY_MARKER = '&'
REDIRECT_MARKER = '>'
WHITESPACE = ' \t\n'


@dataclass
class SubCommand:
    """
    One unit of work from an input line.

    Attributes:
        args: Argument words; args[0] is the command name
        redirect: File receiving stdout and stderr, or None
    """

    args: List[str] = field(default_factory=list)
    redirect: Optional[str] = None

    @property
    def name(self) -> str:
        return self.args[0]

    @property
    def operands(self) -> List[str]:
        return self.args[1:]


def split_concurrent(line: str) -> List[str]:
    """
    Split a line into trimmed, non-empty sub-command strings.

    Examples:
        >>> split_concurrent("ls & pwd")
        ['ls', 'pwd']
        >>> split_concurrent(" & ls && ")
        ['ls']
    """
    pieces = (piece.strip(WHITESPACE) for piece in line.split(CONCURRENCY_MARKER))
    return [piece for piece in pieces if piece]


def split_redirection(text: str) -> Tuple[str, Optional[str]]:
    """
    Separate the command part from the redirection target.

    Args:
        text: One sub-command

    Returns:
        (command_part, target); target is None when there is no marker

    Raises:
        RedirectionError: If the target is empty, holds another marker,
            or names more than one file

    Examples:
        >>> split_redirection("ls -l > out.txt")
        ('ls -l ', 'out.txt')
        >>> split_redirection("ls")
        ('ls', None)
    """
    command_part, marker, rest = text.partition(REDIRECT_MARKER)
    if not marker:
        return text, None

    target = rest.strip(WHITESPACE)
    if not target:
        raise RedirectionError(text, "missing file name")
    if REDIRECT_MARKER in target:
        raise RedirectionError(text, "multiple redirection markers")
    if any(ch in target for ch in WHITESPACE):
        raise RedirectionError(text, "more than one file name")
    return command_part, target


def tokenize_args(command_part: str) -> List[str]:
    """
    Split a command part on runs of whitespace.

    Examples:
        >>> tokenize_args("  ls   -l\\t/tmp ")
        ['ls', '-l', '/tmp']
        >>> tokenize_args("   ")
        []
    """
    return command_part.split()


def parse_subcommand(text: str) -> SubCommand:
    """
    Parse one sub-command string into a SubCommand.

    Raises:
        RedirectionError: On a malformed redirection
        EmptyCommandError: If no command word is left
    """
    command_part, target = split_redirection(text)
    args = tokenize_args(command_part)
    if not args:
        raise EmptyCommandError(text)
    return SubCommand(args=args, redirect=target)


__all__ = [
    'CONCURRENCY_MARKER',
    'REDIRECT_MARKER',
    'SubCommand',
    'split_concurrent',
    'split_redirection',
    'tokenize_args',
    'parse_subcommand',
]
