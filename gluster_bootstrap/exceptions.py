"""Custom exceptions for Gluster Bootstrap."""

from typing import List


class GlusterBootstrapException(Exception):
    """Base exception for gluster bootstrap errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class PrivilegeError(GlusterBootstrapException):
    """Not running with superuser privileges."""

    pass


class BootstrapEnvironmentError(GlusterBootstrapException):
    """A required environment variable is missing."""

    pass


class GlusterCommandError(GlusterBootstrapException):
    """The gluster CLI exited with a non-zero status."""

    def __init__(self, command: List[str], returncode: int, message: str = None):
        self.command = command
        self.returncode = returncode
        super().__init__(message or f"Command {' '.join(command)!r} failed with exit code {returncode}")
