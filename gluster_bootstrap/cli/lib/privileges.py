"""
Privilege checks.
"""

import logging
import os

from gluster_bootstrap.exceptions import PrivilegeError

ROOT_REQUIRED_MESSAGE = "This script must be run as root"

logger = logging.getLogger(__name__)


def is_root() -> bool:
    """Return True if the effective user id is 0."""
    return os.geteuid() == 0


def require_root() -> None:
    """
    Ensure the process runs with superuser privileges.

    Raises:
        PrivilegeError: If the effective user is not root
    """
    if not is_root():
        logger.debug("Effective uid %d is not root", os.geteuid())
        raise PrivilegeError(ROOT_REQUIRED_MESSAGE)
