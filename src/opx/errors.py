"""Exceptions raised by opx."""


class OpxError(Exception):
    """Base exception for opx errors."""
    pass


class EnvFileNotFoundError(OpxError):
    """No env file in the directory or any of its parents."""
    pass


class OpNotInstalledError(OpxError):
    """1Password CLI not found on PATH."""
    pass
