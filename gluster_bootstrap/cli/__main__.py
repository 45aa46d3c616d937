#!/usr/bin/env python3
"""
Entry point for gluster-bootstrap CLI tool.
"""

import sys

from gluster_bootstrap.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
