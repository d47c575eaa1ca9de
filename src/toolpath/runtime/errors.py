"""Errors raised by toolpath."""

from __future__ import annotations


class ToolpathError(RuntimeError):
    """Base class for all toolpath errors."""


class UnsupportedPlatformError(ToolpathError):
    """Raised on a Windows host where WSL is not available."""

    def __init__(self, platform_id: str, launcher: str = "wsl"):
        self.platform_id = platform_id
        self.launcher = launcher
        super().__init__(
            "WSL is required on Windows. Please install WSL to use this tool.\n\n"
            f"  Checked: `{launcher} --status` did not succeed on {platform_id}.\n"
            "  Install: wsl --install (then restart and install node and claude inside WSL)"
        )


class ConfigError(ToolpathError):
    """Raised when .toolpath.toml or TOOLPATH_* variables hold invalid values."""
