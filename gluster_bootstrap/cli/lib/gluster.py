"""
GlusterFS volume management via the `gluster` CLI.
"""

import logging
import subprocess
from typing import List, Sequence

from gluster_bootstrap.cli.lib.validators import validate_brick_path, validate_hostname, validate_volume_name
from gluster_bootstrap.exceptions import GlusterCommandError

logger = logging.getLogger(__name__)

# Shell convention for "command not found"
COMMAND_NOT_FOUND = 127


def brick_spec(host: str, path: str) -> str:
    """
    Build a brick specification.

    Args:
        host: Host name serving the brick
        path: Absolute directory path on that host

    Returns:
        Brick string in `host:path` form (e.g., "node1:/mnt/gluster-brick")
    """
    validate_hostname(host)
    validate_brick_path(path)
    return f"{host}:{path}"


def _run_gluster(cmd: List[str]) -> None:
    logger.debug("Running: %s", " ".join(cmd))
    try:
        # stdout/stderr are inherited so the tool reports on its own streams
        result = subprocess.run(cmd, check=False)
    except FileNotFoundError:
        logger.info("Executable not found: %s", cmd[0])
        raise GlusterCommandError(cmd, COMMAND_NOT_FOUND, f"{cmd[0]}: command not found")

    if result.returncode != 0:
        logger.info("Command failed with exit code %d: %s", result.returncode, " ".join(cmd))
        raise GlusterCommandError(cmd, result.returncode)


def create_volume(
    name: str,
    bricks: Sequence[str],
    *,
    force: bool = False,
    gluster_bin: str = "gluster",
) -> None:
    """
    Create a GlusterFS volume.

    Args:
        name: Volume name
        bricks: Brick specifications (`host:path`)
        force: Append `force`, overriding the refusal to reuse a non-empty
            or root-filesystem brick path
        gluster_bin: gluster executable to call

    Raises:
        ValueError: If name is invalid or no bricks are given
        GlusterCommandError: If volume creation fails
    """
    validate_volume_name(name)
    if not bricks:
        raise ValueError("At least one brick is required")

    cmd = [gluster_bin, "vol", "create", name, *bricks]
    if force:
        cmd.append("force")

    _run_gluster(cmd)


def start_volume(name: str, *, gluster_bin: str = "gluster") -> None:
    """
    Start a GlusterFS volume.

    Raises:
        ValueError: If name is invalid
        GlusterCommandError: If starting the volume fails
    """
    validate_volume_name(name)
    _run_gluster([gluster_bin, "vol", "start", name])
