"""Probe primitives for the local filesystem and for WSL.

Both probers answer the same questions (where does ``which`` say a command
is, does a file or directory exist, what is in a directory, what is the npm
global prefix) so the resolver can run one probe chain for either strategy.
"""

from __future__ import annotations

import logging
import os
import posixpath
import shlex
import shutil
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from ..utils.process import DEFAULT_TIMEOUT, run_command

logger = logging.getLogger(__name__)

Runner = Callable[[Sequence[str], float], Optional[str]]

EXISTS_SENTINEL = "exists"


class LocalProber:
    """Probes run directly on a macOS or Linux host."""

    def __init__(
        self,
        platform_id: str,
        runner: Runner = run_command,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.platform_key = "darwin" if platform_id == "darwin" else "linux"
        self._runner = runner
        self.timeout = timeout

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name)

    def is_file(self, path: str) -> bool:
        try:
            return Path(path).expanduser().is_file()
        except OSError as e:
            logger.debug("Cannot stat %s: %s", path, e)
            return False

    def is_dir(self, path: str) -> bool:
        try:
            return Path(path).expanduser().is_dir()
        except OSError as e:
            logger.debug("Cannot stat %s: %s", path, e)
            return False

    def list_dirs(self, path: str) -> List[str]:
        try:
            return [p.name for p in Path(path).expanduser().iterdir() if p.is_dir()]
        except OSError as e:
            logger.debug("Cannot list %s: %s", path, e)
            return []

    def global_prefix(self, command: Sequence[str]) -> Optional[str]:
        return self._runner(command, self.timeout)

    def join(self, base: str, *parts: str) -> str:
        return os.path.join(base, *parts)

    def render(self, path: str) -> str:
        """Local results are absolute, with ~ expanded."""
        return str(Path(path).expanduser())


class SubsystemProber:
    """Probes run inside WSL from a Windows host.

    Paths live in the Linux filesystem, so existence checks and directory
    listings go through the launcher instead of the local filesystem.
    Results keep their ``~/`` form; the WSL shell expands it at launch time.
    """

    platform_key = "wsl"

    def __init__(
        self,
        prefix: Tuple[str, ...],
        runner: Runner = run_command,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.prefix = tuple(prefix)
        self._runner = runner
        self.timeout = timeout

    def which(self, name: str) -> Optional[str]:
        return self._runner([*self.prefix, "--", "which", name], self.timeout)

    def is_file(self, path: str) -> bool:
        return self._test("-f", path)

    def is_dir(self, path: str) -> bool:
        return self._test("-d", path)

    def list_dirs(self, path: str) -> List[str]:
        output = self._shell(f"ls -1 {shell_path(path)} 2>/dev/null")
        if not output:
            return []
        return [line.strip() for line in output.splitlines() if line.strip()]

    def global_prefix(self, command: Sequence[str]) -> Optional[str]:
        return self._runner([*self.prefix, "--", *command], self.timeout)

    def join(self, base: str, *parts: str) -> str:
        return posixpath.join(base, *parts)

    def render(self, path: str) -> str:
        return path

    def _test(self, flag: str, path: str) -> bool:
        # Only the exact sentinel counts; a launcher that fails quietly prints nothing
        output = self._shell(f"test {flag} {shell_path(path)} && echo {EXISTS_SENTINEL}")
        return output == EXISTS_SENTINEL

    def _shell(self, script: str) -> Optional[str]:
        return self._runner([*self.prefix, "-e", "sh", "-c", script], self.timeout)


def shell_path(path: str) -> str:
    """Quote a path for sh while keeping a leading ~ expandable."""
    if path == "~":
        return '"$HOME"'
    if path.startswith("~/"):
        return '"$HOME"/' + shlex.quote(path[2:])
    return shlex.quote(path)
