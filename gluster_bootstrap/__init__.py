"""
Gluster Bootstrap - one-shot GlusterFS volume setup for a single node.

This package provides a CLI tool that creates and starts a local GlusterFS
volume through the `gluster` administration command.
"""

__version__ = "0.1.0"
__all__ = ["cli", "exceptions"]
