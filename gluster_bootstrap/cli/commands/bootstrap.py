"""
Bootstrap command: create and start the local GlusterFS volume.
"""

import logging

import typer

from gluster_bootstrap.cli.lib.config import BootstrapConfig, load_config
from gluster_bootstrap.cli.lib.environment import ensure_config_dir, local_hostname
from gluster_bootstrap.cli.lib.gluster import brick_spec, create_volume, start_volume
from gluster_bootstrap.cli.lib.privileges import require_root
from gluster_bootstrap.exceptions import GlusterCommandError, PrivilegeError

VOLUME_NAME = "test"
BRICK_PATH = "/mnt/gluster-brick"

logger = logging.getLogger(__name__)


def setup_gluster(hostname: str, *, gluster_bin: str = "gluster") -> None:
    """
    Create the volume on a single local brick, then start it.

    A failed create raises before the start is attempted.
    """
    typer.echo("setup gluster")

    typer.echo("\tcreate vol")
    create_volume(VOLUME_NAME, [brick_spec(hostname, BRICK_PATH)], force=True, gluster_bin=gluster_bin)

    typer.echo("\tstart vol")
    start_volume(VOLUME_NAME, gluster_bin=gluster_bin)


def run_bootstrap(cfg: BootstrapConfig) -> None:
    """
    Run the full bootstrap sequence. Each step aborts the rest on failure;
    nothing is rolled back.
    """
    require_root()
    path = ensure_config_dir()
    logger.info("Configuration directory ready: %s", path)

    hostname = local_hostname()
    logger.info("Bootstrapping volume %s on %s:%s", VOLUME_NAME, hostname, BRICK_PATH)
    setup_gluster(hostname, gluster_bin=cfg.gluster_bin)


def bootstrap():
    """
    Create and start the local GlusterFS volume.

    Must be run as root. Takes no arguments.
    """
    try:
        require_root()
        cfg = load_config()
        logging.basicConfig(level=cfg.log_level_value, format="%(levelname)s %(name)s: %(message)s")
        run_bootstrap(cfg)
    except PrivilegeError as e:
        typer.echo(e.message)
        raise typer.Exit(1)
    except GlusterCommandError as e:
        typer.echo(f"Error: {e.message}", err=True)
        # Killed by signal N: report 128+N like a shell would
        raise typer.Exit(e.returncode if e.returncode > 0 else 128 - e.returncode)
    except KeyboardInterrupt:
        typer.echo("\nOperation cancelled by user", err=True)
        raise typer.Exit(130)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
