"""
Base utilities for command implementations.
"""

from typing import Optional

from ..exceptions import BuiltinUsageError
from ..process import Process


def validate_arg_count(process: Process, min_args: int = 0,
                       max_args: Optional[int] = None) -> None:
    """
    Validate the number of operands.

    Args:
        process: The process object
        min_args: Minimum required operands
        max_args: Maximum allowed operands (None = unlimited)

    Raises:
        BuiltinUsageError: If the count is out of range
    """
    arg_count = len(process.args)

    if arg_count < min_args:
        raise BuiltinUsageError(process.command, "missing operand")

    if max_args is not None and arg_count > max_args:
        raise BuiltinUsageError(process.command, "too many arguments")


__all__ = [
    'validate_arg_count',
]
