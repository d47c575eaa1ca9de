"""Resolver for the node and claude executables."""

import logging
import sys
import threading
from typing import Callable, Optional, Tuple, Union

from ..utils.process import DEFAULT_TIMEOUT, command_succeeds, run_command
from .errors import UnsupportedPlatformError
from .platform import DEFAULT_LAUNCHER, StatusCheck, classify_platform, is_subsystem_available
from .probes import LocalProber, Runner, SubsystemProber
from .specs import CLI_TOOL, INTERPRETER, ToolSpec, get_tool_spec
from .types import (
    ResolutionSource,
    ResolvedPaths,
    Strategy,
    SubsystemStrategy,
    UnsupportedStrategy,
)
from .versions import latest_version

logger = logging.getLogger(__name__)

Prober = Union[LocalProber, SubsystemProber]


def normalize_override(value: Optional[str]) -> Optional[str]:
    """Treat blank overrides as absent."""
    if value is None or not value.strip():
        return None
    return value


class PathResolver:
    """Resolves where node and claude live on this host.

    Priority, per tool:
    1. Explicit override
    2. ``which`` (directly, or inside WSL)
    3. Conventional install locations for the platform
    4. Latest nvm-managed version
    5. npm global prefix
    6. Bare command name

    Override-free results are cached on the instance until ``invalidate()``.
    One resolver is meant to live for the whole process.
    """

    def __init__(
        self,
        platform_id: Optional[str] = None,
        runner: Runner = run_command,
        status_check: StatusCheck = command_succeeds,
        timeout: float = DEFAULT_TIMEOUT,
        launcher: str = DEFAULT_LAUNCHER,
    ):
        """Initialize resolver.

        Args:
            platform_id: Host platform in ``sys.platform`` form (defaults to this host)
            runner: Runs a probe command, returning trimmed stdout or None
            status_check: Runs a command, returning whether it exited with 0
            timeout: Per-probe timeout in seconds
            launcher: WSL launcher command
        """
        self.platform_id = platform_id or sys.platform
        self.timeout = timeout
        self.launcher = launcher
        self._runner = runner
        self._status_check = status_check
        self._strategy: Optional[Strategy] = None
        self._cached: Optional[ResolvedPaths] = None
        self._lock = threading.Lock()

    @property
    def cached(self) -> Optional[ResolvedPaths]:
        """Last override-free result, if any."""
        return self._cached

    def resolve(
        self,
        node_override: Optional[str] = None,
        claude_override: Optional[str] = None,
        refresh: bool = False,
    ) -> ResolvedPaths:
        """Resolve node and claude paths.

        Args:
            node_override: Explicit node path; blank means auto-detect
            claude_override: Explicit claude path; blank means auto-detect
            refresh: Drop the cached result before resolving

        Returns:
            ResolvedPaths. Results with any override are never cached.

        Raises:
            UnsupportedPlatformError: On Windows without WSL
        """
        node_override = normalize_override(node_override)
        claude_override = normalize_override(claude_override)
        has_override = node_override is not None or claude_override is not None

        with self._lock:
            if refresh:
                self._clear()

            strategy = self._get_strategy()
            if isinstance(strategy, UnsupportedStrategy):
                raise UnsupportedPlatformError(strategy.platform_id, self.launcher)

            if not has_override and self._cached is not None:
                return self._cached

            paths = self._resolve_paths(strategy, node_override, claude_override)
            if not has_override:
                self._cached = paths
            return paths

    def invalidate(self) -> None:
        """Forget the cached result so the next resolve() probes again."""
        with self._lock:
            self._clear()

    def reconfigure(self, timeout: float, launcher: str) -> bool:
        """Apply new probe settings, dropping the cache if they changed.

        Returns:
            True if anything changed
        """
        with self._lock:
            if timeout == self.timeout and launcher == self.launcher:
                return False
            logger.debug(
                "Resolver settings changed: timeout %s -> %s, launcher %s -> %s",
                self.timeout, timeout, self.launcher, launcher,
            )
            self.timeout = timeout
            self.launcher = launcher
            self._clear()
            return True

    def _clear(self) -> None:
        self._cached = None
        self._strategy = None

    def _get_strategy(self) -> Strategy:
        if self._strategy is None:
            self._strategy = classify_platform(
                self.platform_id,
                lambda: is_subsystem_available(self.launcher, self.timeout, self._status_check),
                self.launcher,
            )
            logger.debug("Platform %s classified as %s", self.platform_id, self._strategy)
        return self._strategy

    def _make_prober(self, strategy: Strategy) -> Prober:
        if isinstance(strategy, SubsystemStrategy):
            return SubsystemProber(strategy.prefix, self._runner, self.timeout)
        return LocalProber(strategy.platform_id, self._runner, self.timeout)

    def _resolve_paths(
        self,
        strategy: Strategy,
        node_override: Optional[str],
        claude_override: Optional[str],
    ) -> ResolvedPaths:
        prober = self._make_prober(strategy)
        node_path, node_source = self._resolve_tool(INTERPRETER, prober, node_override)
        claude_path, claude_source = self._resolve_tool(CLI_TOOL, prober, claude_override)

        uses_subsystem = isinstance(strategy, SubsystemStrategy)
        paths = ResolvedPaths(
            interpreter_path=node_path,
            tool_path=claude_path,
            uses_subsystem=uses_subsystem,
            subsystem_prefix=strategy.prefix if uses_subsystem else None,
            interpreter_source=node_source,
            tool_source=claude_source,
        )
        logger.info("Resolved %r", paths)
        return paths

    def _resolve_tool(
        self,
        tool: str,
        prober: Prober,
        override: Optional[str],
    ) -> Tuple[str, ResolutionSource]:
        """Run the probe chain for one tool. Never raises for a missing tool."""
        spec = get_tool_spec(tool)

        if override is not None:
            logger.debug("%s: using override %s", spec.display_name, override)
            return override, ResolutionSource.OVERRIDE

        steps: Tuple[Tuple[ResolutionSource, Callable[[ToolSpec, Prober], Optional[str]]], ...] = (
            (ResolutionSource.WHICH, self._detect_which),
            (ResolutionSource.CONVENTIONAL_PATH, self._detect_conventional_path),
            (ResolutionSource.VERSION_MANAGER, self._detect_version_manager),
            (ResolutionSource.GLOBAL_PREFIX, self._detect_global_prefix),
        )
        for source, step in steps:
            path = step(spec, prober)
            if path:
                logger.debug("%s: found via %s at %s", spec.display_name, source.value, path)
                return path, source
            logger.debug("%s: nothing via %s", spec.display_name, source.value)

        logger.warning(
            "%s not found; falling back to bare command '%s'",
            spec.display_name,
            spec.executable_name,
        )
        return spec.executable_name, ResolutionSource.FALLBACK

    def _detect_which(self, spec: ToolSpec, prober: Prober) -> Optional[str]:
        result = prober.which(spec.executable_name)
        if result and result.strip():
            return result.strip()
        return None

    def _detect_conventional_path(self, spec: ToolSpec, prober: Prober) -> Optional[str]:
        for path in spec.paths_for(prober.platform_key):
            if prober.is_file(path):
                return prober.render(path)
        return None

    def _detect_version_manager(self, spec: ToolSpec, prober: Prober) -> Optional[str]:
        """Check the highest installed nvm version."""
        rule = spec.version_manager
        if rule is None or not prober.is_dir(rule.versions_dir):
            return None

        version = latest_version(prober.list_dirs(rule.versions_dir))
        if version is None:
            return None

        candidate = prober.join(rule.versions_dir, version, rule.executable_path)
        if prober.is_file(candidate):
            return prober.render(candidate)
        return None

    def _detect_global_prefix(self, spec: ToolSpec, prober: Prober) -> Optional[str]:
        rule = spec.global_prefix
        if rule is None:
            return None

        prefix = prober.global_prefix(rule.prefix_command)
        if not prefix:
            return None

        candidate = prober.join(prefix, rule.executable_path)
        if prober.is_file(candidate):
            return prober.render(candidate)
        return None
