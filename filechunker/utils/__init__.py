"""Utilities: configuration files."""

from .config_file import build_config, load_config_file

__all__ = [
    "build_config",
    "load_config_file",
]
