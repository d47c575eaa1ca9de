"""Declarative search specifications for the executables toolpath locates.

This is DATA, not code. To change where a tool is looked for, edit its spec here.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class VersionManagerDetection:
    """Version manager layout (one subdirectory per installed version)."""
    versions_dir: str = "~/.nvm/versions/node"
    executable_path: str = "bin/node"


@dataclass(frozen=True)
class GlobalPrefixDetection:
    """Executable location below the package manager's global prefix."""
    prefix_command: Tuple[str, ...] = ("npm", "config", "get", "prefix")
    executable_path: str = "bin/node"


@dataclass(frozen=True)
class ToolSpec:
    """Complete search specification for one executable.

    Conventional paths are keyed by platform id ("darwin", "linux") plus
    "wsl" for lookups performed inside WSL. Order matters: the first
    existing path wins.
    """
    display_name: str
    executable_name: str
    config_key: str
    conventional_paths: Dict[str, Tuple[str, ...]]
    version_manager: Optional[VersionManagerDetection] = None
    global_prefix: Optional[GlobalPrefixDetection] = None

    def paths_for(self, platform_key: str) -> Tuple[str, ...]:
        """Return conventional paths for a platform, falling back to Linux."""
        if platform_key in self.conventional_paths:
            return self.conventional_paths[platform_key]
        return self.conventional_paths["linux"]


INTERPRETER = "interpreter"
CLI_TOOL = "tool"

_CLAUDE_UNIX_PATHS = (
    "~/.claude/local/node_modules/.bin/claude",
    "/usr/local/lib/node_modules/.bin/claude",
    "/usr/local/bin/claude",
    "~/.npm-global/bin/claude",
    "~/.local/share/npm/bin/claude",
)

TOOL_SPECS: Dict[str, ToolSpec] = {
    INTERPRETER: ToolSpec(
        display_name="Node.js",
        executable_name="node",
        config_key="node_location",
        conventional_paths={
            "darwin": (
                "/usr/local/bin/node",
                "/opt/homebrew/bin/node",
                "/usr/bin/node",
                "~/.nvm/current/bin/node",
            ),
            "linux": (
                "/usr/local/bin/node",
                "/usr/bin/node",
                "~/.nvm/current/bin/node",
            ),
            "wsl": (
                "/usr/local/bin/node",
                "/usr/bin/node",
                "~/.nvm/current/bin/node",
                "/usr/local/nodejs/bin/node",
            ),
        },
        version_manager=VersionManagerDetection(executable_path="bin/node"),
        global_prefix=GlobalPrefixDetection(executable_path="bin/node"),
    ),

    CLI_TOOL: ToolSpec(
        display_name="Claude Code",
        executable_name="claude",
        config_key="claude_location",
        conventional_paths={
            "darwin": _CLAUDE_UNIX_PATHS,
            "linux": _CLAUDE_UNIX_PATHS,
            "wsl": (
                "/usr/local/bin/claude",
                "~/.claude/local/node_modules/.bin/claude",
                "~/.npm-global/bin/claude",
                "~/.local/share/npm/bin/claude",
            ),
        },
        # npm installs global packages next to the nvm-managed node binary
        version_manager=VersionManagerDetection(executable_path="bin/claude"),
        global_prefix=GlobalPrefixDetection(executable_path="bin/claude"),
    ),
}


def get_tool_spec(tool: str) -> ToolSpec:
    """Get the search spec for a tool.

    Args:
        tool: "interpreter" or "tool"

    Returns:
        Tool specification

    Raises:
        ValueError: If the tool is unknown
    """
    if tool not in TOOL_SPECS:
        supported = ", ".join(TOOL_SPECS.keys())
        raise ValueError(
            f"Tool '{tool}' not supported. "
            f"Supported tools: {supported}"
        )

    return TOOL_SPECS[tool]
