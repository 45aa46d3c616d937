#!/usr/bin/env python3
"""
Main CLI entry point using Typer.
"""

import sys

import typer

from gluster_bootstrap.cli.commands import bootstrap

app = typer.Typer(
    name="gluster-bootstrap",
    help="Create and start a local GlusterFS volume",
    add_completion=False,
)

# Single command: invoked directly, without a subcommand name
app.command(name="bootstrap")(bootstrap.bootstrap)


def main() -> int:
    """Main entry point."""
    try:
        app()
        return 0
    except KeyboardInterrupt:
        typer.echo("\nOperation cancelled by user", err=True)
        return 130
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
