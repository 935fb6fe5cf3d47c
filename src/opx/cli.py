"""CLI for opx - thin wrapper around `op run`."""

import logging
import os
import sys

from rich.logging import RichHandler

from . import __version__
from .config import is_debug
from .errors import EnvFileNotFoundError
from .locate import require_env_file
from .output import console, err_console, error
from . import run

USAGE = """opx - Thin wrapper around `op run`

Usage:
  opx <command> [args...]

Examples:
  opx bun run dev
  opx node server.js
  opx docker compose up

opx automatically finds the nearest .env file and runs:
  op run --env-file=<path> -- <command> [args...]"""


def setup_logging():
    """Send debug logs to stderr when OPX_DEBUG is set."""
    if not is_debug():
        return
    handler = RichHandler(console=err_console, show_path=False)
    logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[handler])


def print_usage(stderr: bool = False):
    target = err_console if stderr else console
    target.print(USAGE, markup=False, highlight=False, emoji=False, soft_wrap=True)


def cmd_run(args):
    """Locate the nearest env file and run the command through op."""
    try:
        env_file = require_env_file(os.getcwd())
    except EnvFileNotFoundError as e:
        error(str(e))
        return 1

    return run.run(env_file, args)


def main(argv=None):
    """Main entry point."""
    args = list(sys.argv[1:] if argv is None else argv)

    setup_logging()

    if not args:
        print_usage(stderr=True)
        return 1

    # Only the first argument is ours; everything else belongs to the command
    if args[0] in ("--help", "-h"):
        print_usage()
        return 0

    if args[0] == "--version":
        console.print(__version__, markup=False, highlight=False, emoji=False)
        return 0

    return cmd_run(args)


if __name__ == "__main__":
    sys.exit(main())
