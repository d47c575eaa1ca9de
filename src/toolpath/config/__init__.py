"""Configuration management for toolpath."""

from .parser import (
    ToolpathConfig,
    find_config_file,
    load_config,
)

__all__ = [
    "ToolpathConfig",
    "load_config",
    "find_config_file",
]
