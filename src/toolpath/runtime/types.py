"""Data types for executable path resolution."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union


class ResolutionSource(str, Enum):
    """Which probe step produced a resolved path."""

    OVERRIDE = "override"
    WHICH = "which"
    CONVENTIONAL_PATH = "conventional_path"
    VERSION_MANAGER = "version_manager"
    GLOBAL_PREFIX = "global_prefix"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class NativeStrategy:
    """Resolve directly on a Unix-like host (macOS, Linux)."""

    platform_id: str


@dataclass(frozen=True)
class SubsystemStrategy:
    """Resolve inside WSL on a Windows host.

    Attributes:
        prefix: Launcher tokens that must precede every command run in WSL
    """

    prefix: Tuple[str, ...] = ("wsl",)


@dataclass(frozen=True)
class UnsupportedStrategy:
    """Windows host without WSL. Resolution cannot proceed."""

    platform_id: str
    reason: str


Strategy = Union[NativeStrategy, SubsystemStrategy, UnsupportedStrategy]


@dataclass(frozen=True)
class ResolvedPaths:
    """Resolved locations of the Node.js runtime and the Claude CLI.

    Attributes:
        interpreter_path: Absolute path to node, or the bare name "node"
        tool_path: Absolute path to claude, or the bare name "claude"
        uses_subsystem: Whether commands must be launched through WSL
        subsystem_prefix: WSL launcher tokens, set iff uses_subsystem is True
        interpreter_source: Probe step that produced interpreter_path
        tool_source: Probe step that produced tool_path
    """

    interpreter_path: str
    tool_path: str
    uses_subsystem: bool = False
    subsystem_prefix: Optional[Tuple[str, ...]] = None
    interpreter_source: ResolutionSource = ResolutionSource.FALLBACK
    tool_source: ResolutionSource = ResolutionSource.FALLBACK

    def __post_init__(self) -> None:
        if not self.interpreter_path or not self.tool_path:
            raise ValueError("Resolved paths must be non-empty")
        if self.uses_subsystem and not self.subsystem_prefix:
            raise ValueError("subsystem_prefix is required when uses_subsystem is set")
        if not self.uses_subsystem and self.subsystem_prefix is not None:
            raise ValueError("subsystem_prefix is only valid when uses_subsystem is set")

    def is_degraded(self, tool: str) -> bool:
        """Return True if the given tool ("interpreter" or "tool") fell back to its bare name."""
        if tool == "interpreter":
            return self.interpreter_source == ResolutionSource.FALLBACK
        if tool == "tool":
            return self.tool_source == ResolutionSource.FALLBACK
        raise ValueError(f"Unknown tool '{tool}', expected 'interpreter' or 'tool'")

    def interpreter_command(self, *args: str) -> List[str]:
        """Build an argv that runs node, WSL prefix included."""
        return self._command(self.interpreter_path, args)

    def tool_command(self, *args: str) -> List[str]:
        """Build an argv that runs claude, WSL prefix included."""
        return self._command(self.tool_path, args)

    def _command(self, executable: str, args: Tuple[str, ...]) -> List[str]:
        prefix = list(self.subsystem_prefix) if self.uses_subsystem else []
        return prefix + [executable, *args]

    def to_dict(self) -> dict:
        return {
            "interpreter_path": self.interpreter_path,
            "tool_path": self.tool_path,
            "uses_subsystem": self.uses_subsystem,
            "subsystem_prefix": list(self.subsystem_prefix) if self.subsystem_prefix else None,
            "interpreter_source": self.interpreter_source.value,
            "tool_source": self.tool_source.value,
        }

    def __repr__(self) -> str:
        wsl_note = f" via {' '.join(self.subsystem_prefix)}" if self.uses_subsystem else ""
        return (
            f"<ResolvedPaths node @ {self.interpreter_path} ({self.interpreter_source.value}), "
            f"claude @ {self.tool_path} ({self.tool_source.value}){wsl_note}>"
        )
