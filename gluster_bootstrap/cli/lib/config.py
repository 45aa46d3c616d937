"""
Configuration loader for Gluster Bootstrap.

Only tool-level settings live here (which `gluster` binary to call, how
verbose to log). The volume name, brick path and force flag are fixed and not
configurable.
"""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path


DEFAULT_CONFIG_PATH = Path("/etc/gluster-bootstrap/bootstrap.conf")
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class BootstrapConfig:
    gluster_bin: str = "gluster"
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def _config_path() -> Path:
    env = os.environ.get("GLUSTER_BOOTSTRAP_CONFIG_PATH")
    if env:
        return Path(env)
    return DEFAULT_CONFIG_PATH


def _read_ini(path: Path) -> configparser.ConfigParser:
    parser = configparser.ConfigParser()
    if path.exists():
        parser.read(path, encoding="utf-8")
    return parser


def load_config() -> BootstrapConfig:
    """
    Load config from `GLUSTER_BOOTSTRAP_CONFIG_PATH` or
    `/etc/gluster-bootstrap/bootstrap.conf`, section `[gluster]`.

    Missing files are not an error; defaults are returned.
    """
    parser = _read_ini(_config_path())
    if not parser.has_section("gluster"):
        parser.add_section("gluster")
    section = parser["gluster"]

    def _get(key: str, default: str) -> str:
        return section.get(key, fallback=default).strip()

    def _parse_level(raw: str) -> str:
        level = raw.upper()
        if level not in _LOG_LEVELS:
            return DEFAULT_LOG_LEVEL
        return level

    return BootstrapConfig(
        gluster_bin=_get("gluster_bin", "gluster") or "gluster",
        log_level=_parse_level(_get("log_level", DEFAULT_LOG_LEVEL)),
    )
