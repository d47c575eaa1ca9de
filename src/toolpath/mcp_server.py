"""MCP Server for toolpath.

Exposes node/claude path resolution as MCP tools using FastMCP, so editor
and agent hosts can ask where the executables live instead of making the
user configure them.
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from mcp.server import FastMCP

from .config import ToolpathConfig, find_config_file, load_config
from .runtime import PathResolver
from .runtime.resolver import normalize_override
from .utils.log import configure_logging

logger = logging.getLogger(__name__)

# Process-wide resolver and project path
_resolver: Optional[PathResolver] = None
_project_path: Optional[str] = None

mcp = FastMCP("toolpath")


def set_project_path(path: str) -> None:
    """Set the directory whose .toolpath.toml and .env are used."""
    global _project_path, _resolver
    _project_path = str(Path(path).resolve())
    # Settings may differ per project
    _resolver = None


def get_project_path() -> str:
    """Get the current project path."""
    return _project_path or os.getenv("TOOLPATH_PROJECT_PATH") or os.getcwd()


def get_config() -> ToolpathConfig:
    return load_config(Path(get_project_path()))


def get_resolver(config: Optional[ToolpathConfig] = None) -> PathResolver:
    """Get or create the process-wide resolver.

    Edits to the [resolver] settings are applied to the existing resolver,
    which then probes again on its next call.
    """
    global _resolver
    config = config or get_config()
    if _resolver is None:
        _resolver = PathResolver(
            timeout=config.probe_timeout,
            launcher=config.resolver.subsystem_launcher,
        )
    elif _resolver.reconfigure(config.probe_timeout, config.resolver.subsystem_launcher):
        logger.info("Resolver settings reloaded from configuration")
    return _resolver


# ============================================================================
# Path Resolution Tools
# ============================================================================


@mcp.tool()
async def resolve_tool_paths(
    node_location: str | None = None,
    claude_location: str | None = None,
    refresh: bool = False,
) -> Dict[str, Any]:
    """Resolve where the Node.js runtime and the Claude CLI live.

    Tries, per executable: explicit location, `which`, conventional install
    directories, the newest nvm version, the npm global prefix, and finally
    the bare command name.

    Args:
        node_location: Explicit node path. Falls back to .toolpath.toml /
            TOOLPATH_NODE_LOCATION, then auto-detection.
        claude_location: Explicit claude path. Same fallbacks as node_location.
        refresh: Re-run detection instead of returning the cached result

    Returns:
        - interpreter_path, tool_path: Resolved paths (or bare names)
        - uses_subsystem: True when commands must run through WSL
        - subsystem_prefix: Launcher tokens to prepend (e.g. ["wsl"])
        - interpreter_source, tool_source: Which step found each path
        - tool_command: Ready-to-run argv for the CLI

    Raises:
        UnsupportedPlatformError: On Windows without WSL
    """
    config = get_config()
    resolver = get_resolver(config)

    node_override = normalize_override(node_location) or config.node_override
    claude_override = normalize_override(claude_location) or config.claude_override

    paths = await asyncio.to_thread(resolver.resolve, node_override, claude_override, refresh)
    result = paths.to_dict()
    result["tool_command"] = paths.tool_command()
    return result


@mcp.tool()
async def clear_tool_path_cache() -> Dict[str, Any]:
    """Forget the cached resolution.

    Call this after changing node_location or claude_location so the next
    resolve_tool_paths() probes again.
    """
    get_resolver().invalidate()
    return {"cleared": True}


@mcp.tool()
async def get_toolpath_config() -> Dict[str, Any]:
    """Get the effective toolpath configuration.

    Returns:
        - project_path: Directory configuration is read from
        - config_file: Path to .toolpath.toml (if it exists)
        - tools, resolver, logging: Effective settings after TOOLPATH_* variables
        - cached: Cached resolution, or None
    """
    project_path = Path(get_project_path())
    config = load_config(project_path)
    config_file = find_config_file(project_path)
    cached = get_resolver(config).cached

    result = config.to_dict()
    result["project_path"] = str(project_path)
    result["config_file"] = str(config_file) if config_file else None
    result["cached"] = cached.to_dict() if cached else None
    return result


def main():
    """Run the MCP server.

    The project path can be set via:
    1. First command line argument
    2. TOOLPATH_PROJECT_PATH environment variable
    3. Current working directory (default)
    """
    if len(sys.argv) > 1 and not sys.argv[1].startswith("-"):
        set_project_path(sys.argv[1])
        # Remove the argument so FastMCP doesn't see it
        sys.argv = [sys.argv[0]] + sys.argv[2:]

    project_path = get_project_path()
    config = load_config(Path(project_path))
    configure_logging(config.logging.debug)

    # stdout is used for MCP protocol
    print("Starting toolpath MCP server", file=sys.stderr)
    print(f"Path: {project_path}", file=sys.stderr)
    print("", file=sys.stderr)

    mcp.run()


if __name__ == "__main__":
    main()
