"""Runtime configuration for wish-shell."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os

from .path_manager import DEFAULT_SEARCH_PATH

LOG_LEVEL_ENV = "WISH_LOG_LEVEL"


@dataclass
class ShellConfig:
    """Settings fixed for the lifetime of one shell.

    The search path always starts from default_search_path; nothing the
    `path` built-in does survives the process.
    """

    prompt: str = "wish> "
    default_search_path: list[str] = field(default_factory=lambda: list(DEFAULT_SEARCH_PATH))
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ShellConfig:
        """Build a config, taking the log level from WISH_LOG_LEVEL if set."""
        env = os.environ if environ is None else environ
        config = cls()
        level = env.get(LOG_LEVEL_ENV, "").strip().upper()
        if level and isinstance(logging.getLevelName(level), int):
            config.log_level = level
        return config

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)
