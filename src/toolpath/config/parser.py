"""Configuration file parser for toolpath."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python 3.10

from ..runtime.errors import ConfigError
from ..runtime.resolver import normalize_override

CONFIG_FILENAME = ".toolpath.toml"
ENV_PREFIX = "TOOLPATH_"


@dataclass
class ToolsConfig:
    """User-supplied executable locations. Blank means auto-detect."""

    node_location: str = ""
    claude_location: str = ""


@dataclass
class ResolverConfig:
    """Probe behaviour."""

    probe_timeout_ms: int = 2000
    subsystem_launcher: str = "wsl"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    debug: bool = False


@dataclass
class ToolpathConfig:
    """Complete toolpath configuration."""

    tools: ToolsConfig = field(default_factory=ToolsConfig)
    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Directory the configuration was loaded for
    project_root: Path = field(default_factory=Path.cwd)

    @property
    def node_override(self) -> Optional[str]:
        return normalize_override(self.tools.node_location)

    @property
    def claude_override(self) -> Optional[str]:
        return normalize_override(self.tools.claude_location)

    @property
    def probe_timeout(self) -> float:
        """Per-probe timeout in seconds."""
        return self.resolver.probe_timeout_ms / 1000.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "project_root": str(self.project_root),
            "tools": {
                "node_location": self.tools.node_location,
                "claude_location": self.tools.claude_location,
            },
            "resolver": {
                "probe_timeout_ms": self.resolver.probe_timeout_ms,
                "subsystem_launcher": self.resolver.subsystem_launcher,
            },
            "logging": {"debug": self.logging.debug},
        }


def find_config_file(project_path: Path) -> Optional[Path]:
    """Find .toolpath.toml in the project directory.

    Args:
        project_path: Directory to look in

    Returns:
        Path to .toolpath.toml if found, None otherwise
    """
    config_file = project_path / CONFIG_FILENAME
    if config_file.exists():
        return config_file
    return None


def load_config(project_path: Path, use_env: bool = True) -> ToolpathConfig:
    """Load configuration from .toolpath.toml, then TOOLPATH_* variables.

    Environment variables (including those from a .env file in the project
    directory) take precedence over the file.

    Args:
        project_path: Directory holding .toolpath.toml and .env
        use_env: Apply environment variables on top of the file

    Returns:
        ToolpathConfig with loaded or default configuration

    Raises:
        ConfigError: If a known key holds a value of the wrong type
    """
    project_path = Path(project_path)
    config = ToolpathConfig(project_root=project_path)

    config_file = find_config_file(project_path)
    if config_file:
        try:
            with open(config_file, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            # If TOML parsing fails, keep defaults
            data = {}
        _apply_file_data(config, data)

    if use_env:
        env_file = project_path / ".env"
        if env_file.exists():
            load_dotenv(env_file, override=False)
        _apply_env(config, os.environ)

    return config


def _apply_file_data(config: ToolpathConfig, data: Dict[str, Any]) -> None:
    if "tools" in data:
        tools_data = _section(data, "tools")
        config.tools.node_location = _expect(tools_data, "node_location", str, "tools", "")
        config.tools.claude_location = _expect(tools_data, "claude_location", str, "tools", "")

    if "resolver" in data:
        resolver_data = _section(data, "resolver")
        config.resolver.probe_timeout_ms = _expect(
            resolver_data, "probe_timeout_ms", int, "resolver", 2000
        )
        config.resolver.subsystem_launcher = _expect(
            resolver_data, "subsystem_launcher", str, "resolver", "wsl"
        )

    if "logging" in data:
        logging_data = _section(data, "logging")
        config.logging.debug = _expect(logging_data, "debug", bool, "logging", False)

    _validate(config)


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data[name]
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def _apply_env(config: ToolpathConfig, environ: Any) -> None:
    node = environ.get(f"{ENV_PREFIX}NODE_LOCATION")
    if node is not None:
        config.tools.node_location = node

    claude = environ.get(f"{ENV_PREFIX}CLAUDE_LOCATION")
    if claude is not None:
        config.tools.claude_location = claude

    debug = environ.get(f"{ENV_PREFIX}DEBUG")
    if debug is not None:
        config.logging.debug = debug.strip().lower() in {"1", "true", "yes", "on"}

    timeout = environ.get(f"{ENV_PREFIX}PROBE_TIMEOUT_MS")
    if timeout is not None:
        try:
            config.resolver.probe_timeout_ms = int(timeout)
        except ValueError as e:
            raise ConfigError(
                f"{ENV_PREFIX}PROBE_TIMEOUT_MS must be an integer, got {timeout!r}"
            ) from e

    _validate(config)


def _expect(section: Dict[str, Any], key: str, kind: type, section_name: str, default: Any) -> Any:
    value = section.get(key, default)
    # bool is a subclass of int; don't accept true as a timeout
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(
            f"[{section_name}] {key} must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _validate(config: ToolpathConfig) -> None:
    if config.resolver.probe_timeout_ms <= 0:
        raise ConfigError("probe_timeout_ms must be positive")
    if not config.resolver.subsystem_launcher.strip():
        raise ConfigError("subsystem_launcher must not be empty")
