"""Configuration for opx."""

import os

OP_INSTALL_URL = "https://developer.1password.com/docs/cli/get-started/"


def get_env_file_name() -> str:
    """Get the file name searched for in each directory."""
    return os.environ.get("OPX_ENV_FILE") or ".env"


def get_op_executable() -> str:
    """Get the 1Password CLI executable (name looked up on PATH, or a path)."""
    return os.environ.get("OPX_OP_PATH") or "op"


def is_debug() -> bool:
    """Check if debug logging was requested."""
    return os.environ.get("OPX_DEBUG", "").lower() in ("1", "true", "yes", "on")


# Constants
ENV_FILE_NAME = get_env_file_name()
OP_EXECUTABLE = get_op_executable()
