"""
PATH command - replace the command search path.
"""

from ..process import Process
from . import register_command


@register_command('path')
def cmd_path(process: Process) -> int:
    """
    Set the directories searched for external commands

    Usage: path [dir ...]

    Examples:
      path /bin /usr/bin   # search /bin first, then /usr/bin
      path                 # disable external commands
    """
    process.path_manager.set_search_path(process.args)
    return 0
