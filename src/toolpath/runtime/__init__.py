"""Executable resolution for the Node.js runtime and the Claude CLI."""

from .errors import ConfigError, ToolpathError, UnsupportedPlatformError
from .resolver import PathResolver
from .specs import TOOL_SPECS
from .types import ResolutionSource, ResolvedPaths

__all__ = [
    "PathResolver",
    "ResolvedPaths",
    "ResolutionSource",
    "TOOL_SPECS",
    "ToolpathError",
    "UnsupportedPlatformError",
    "ConfigError",
]
