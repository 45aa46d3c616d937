"""
Input validation functions.
"""

import re


def validate_volume_name(name: str) -> None:
    """
    Validate a GlusterFS volume name.

    Args:
        name: Name to validate

    Raises:
        ValueError: If name is invalid
    """
    if not name:
        raise ValueError("Volume name cannot be empty")

    if len(name) > 64:
        raise ValueError("Volume name must be between 1 and 64 characters")

    # Allow alphanumeric, dots, underscores, hyphens
    if not re.match(r'^[a-zA-Z0-9][a-zA-Z0-9._-]*$', name):
        raise ValueError(
            "Volume name must start with alphanumeric and contain only alphanumeric, dots, underscores, or hyphens"
        )


def validate_hostname(host: str) -> None:
    """
    Validate the host part of a brick specification.

    Raises:
        ValueError: If host is empty or cannot appear before the brick separator
    """
    if not host:
        raise ValueError("Host name cannot be empty")

    if ":" in host or any(c.isspace() for c in host):
        raise ValueError(f"Invalid host name: {host!r}")


def validate_brick_path(path: str) -> None:
    """
    Validate a brick directory path.

    Raises:
        ValueError: If path is empty or not absolute
    """
    if not path:
        raise ValueError("Brick path cannot be empty")

    if not path.startswith("/"):
        raise ValueError(f"Brick path must be absolute: {path}")
