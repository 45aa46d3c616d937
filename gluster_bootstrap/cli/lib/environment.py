"""
Lookups against the invoking user's environment.
"""

import logging
import os
import socket
from pathlib import Path

from gluster_bootstrap.exceptions import BootstrapEnvironmentError

logger = logging.getLogger(__name__)


def home_dir() -> Path:
    """
    Resolve the invoking user's home directory from `HOME`.

    An empty `HOME` is set but blank, so `$HOME/.config` resolves under `/`.

    Raises:
        BootstrapEnvironmentError: If `HOME` is unset
    """
    home = os.environ.get("HOME")
    if home is None:
        raise BootstrapEnvironmentError("HOME is not set")
    return Path(home or "/")


def config_dir() -> Path:
    """Return `$HOME/.config`."""
    return home_dir() / ".config"


def ensure_config_dir() -> Path:
    """
    Create the configuration directory and any missing parents.

    Returns:
        Path to the configuration directory

    Raises:
        BootstrapEnvironmentError: If `HOME` is unset
        OSError: If the directory cannot be created
    """
    path = config_dir()
    if path.is_dir():
        return path

    logger.debug("Creating configuration directory %s", path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def local_hostname() -> str:
    """
    Resolve the local host name.

    `HOSTNAME` wins when exported; otherwise fall back to the kernel host name,
    which is what a shell would have put there.
    """
    env = os.environ.get("HOSTNAME", "").strip()
    if env:
        return env
    return socket.gethostname()
