"""
EXIT command - leave the shell after the current line.
"""

from ..process import Process
from . import register_command
from .base import validate_arg_count


@register_command('exit')
def cmd_exit(process: Process) -> int:
    """
    Request shell termination

    Usage: exit

    Sibling sub-commands on the same line still run and are waited on
    before the shell stops. Any operand is an error.
    """
    validate_arg_count(process, max_args=0)
    process.context.request_exit()
    return 0
