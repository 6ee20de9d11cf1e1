"""Command-line entry point."""

import logging
import sys

from .config import ShellConfig
from .exceptions import StartupError, report_error
from .shell import Shell

log = logging.getLogger("wish_shell")


def main(argv: list[str] | None = None) -> int:
    """Start an interactive shell, or run a batch file given as the only argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    config = ShellConfig.from_env()
    logging.basicConfig(
        level=config.log_level_value,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        if len(args) > 1:
            raise StartupError(f"expected at most one argument, got {len(args)}")
        # Lines go to the OS as typed, even when they are not valid UTF-8
        if hasattr(sys.stdin, "reconfigure"):
            sys.stdin.reconfigure(errors="surrogateescape")
        shell = Shell(config)
        if args:
            return shell.run_batch(args[0])
        return shell.run_interactive()
    except StartupError as e:
        log.debug("startup failed: %s", e)
        report_error(sys.stderr)
        return e.exit_code


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
