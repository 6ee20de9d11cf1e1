"""
Built-in shell commands registry.

The commands live in the commands/ directory; this module loads them and
exposes the lookup used by the line executor.
"""

from .commands import load_all_commands, BUILTINS

load_all_commands()


def get_builtin(command: str):
    """
    Get a built-in command executor.

    Args:
        command: The command name to look up (case-sensitive)

    Returns:
        The command function, or None if not found

    Example:
        >>> executor = get_builtin('cd')
        >>> if executor:
        ...     executor(process)
    """
    return BUILTINS.get(command)
