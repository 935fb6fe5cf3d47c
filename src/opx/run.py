"""Delegate a command to `op run` with the located env file."""

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Tuple, Union

from .config import OP_EXECUTABLE, OP_INSTALL_URL
from .errors import OpNotInstalledError
from .output import error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DelegationRequest:
    """An env file plus the user command to run under `op run`."""

    env_file: Path
    command: Tuple[str, ...]

    def __post_init__(self):
        if not self.command:
            raise ValueError("No command specified")
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "command", tuple(self.command))

    @property
    def argv(self) -> list[str]:
        return build_command(self.env_file, self.command)


def require_op() -> str:
    """Return the resolved path of the 1Password CLI, or raise OpNotInstalledError."""
    op_path = shutil.which(OP_EXECUTABLE)
    if op_path is None:
        raise OpNotInstalledError(
            f"1Password CLI ({OP_EXECUTABLE}) is not installed.\n"
            f"Install it from: {OP_INSTALL_URL}"
        )
    return op_path


def build_command(env_file: Union[str, Path], command: Sequence[str]) -> list[str]:
    """
    Build the `op run` invocation.

    The env file path is embedded in a single ``--env-file=`` token and
    the user command follows ``--`` untouched. Nothing goes through a shell.
    """
    return [OP_EXECUTABLE, "run", f"--env-file={env_file}", "--", *command]


def _wait(proc: subprocess.Popen) -> int:
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            # The child is in our process group and got the same signal
            logger.debug("Interrupted, waiting for pid %s to exit", proc.pid)


def run(env_file: Union[str, Path], command: Sequence[str]) -> int:
    """
    Run ``command`` through `op run` and return its exit code.

    stdin, stdout and stderr are inherited so interactive programs work
    unchanged. Returns 1 without spawning anything if op is missing, and
    1 if the child died without an exit code (killed by a signal).
    """
    request = DelegationRequest(Path(env_file), tuple(command))

    try:
        require_op()
    except OpNotInstalledError as e:
        error(str(e))
        return 1

    argv = request.argv
    logger.debug("Running: %s", argv)

    try:
        with subprocess.Popen(argv) as proc:
            returncode = _wait(proc)
    except OSError as e:
        # op disappeared between the PATH lookup and the spawn
        error(f"Failed to start {OP_EXECUTABLE}: {e}")
        return 1

    if returncode < 0:
        logger.debug("%s terminated by signal %d", OP_EXECUTABLE, -returncode)
        return 1

    return returncode
