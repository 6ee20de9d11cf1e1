"""
CD command - change working directory.
"""

from ..process import Process
from . import register_command
from .base import validate_arg_count


@register_command('cd')
def cmd_cd(process: Process) -> int:
    """
    Change the working directory

    Usage: cd dir
    """
    validate_arg_count(process, min_args=1, max_args=1)
    process.path_manager.change_directory(process.args[0])
    return 0
