"""
opx - Thin wrapper around `op run`.

Finds the nearest .env file (current directory or any parent) and runs:

    op run --env-file=<path> -- <command> [args...]

Requires: op (1Password CLI)
"""

__version__ = "0.1.0"
