"""
Registry of built-in commands.

Each module in this package defines one command function and registers it
with @register_command(name). load_all_commands() imports the modules so
the registry is populated.
"""

import importlib
from typing import Callable, Dict

BUILTINS: Dict[str, Callable] = {}

COMMAND_MODULES = ['exit_cmd', 'cd', 'path']


def register_command(name: str):
    """
    Register a function as the built-in called name.

    Example:
        @register_command('cd')
        def cmd_cd(process):
            ...
    """
    def decorator(func):
        BUILTINS[name] = func
        return func
    return decorator


def load_all_commands() -> None:
    """Import every command module so its registration runs."""
    for module_name in COMMAND_MODULES:
        importlib.import_module(f'{__name__}.{module_name}')
