"""Subprocess helpers for probe commands.

Probe commands are allowed to fail: every failure mode (missing executable,
non-zero exit, timeout, empty output) is reported as ``None`` rather than
raised, so callers can simply move on to their next candidate.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 2.0


def run_command(args: Sequence[str], timeout: float = DEFAULT_TIMEOUT) -> Optional[str]:
    """Run a command and return its trimmed stdout.

    Args:
        args: Command and arguments (no shell involved)
        timeout: Seconds before the command is abandoned

    Returns:
        Trimmed stdout, or None if the command failed or printed nothing
    """
    try:
        result = subprocess.run(
            list(args),
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (subprocess.SubprocessError, OSError) as e:
        logger.debug("Probe %r could not run: %s", list(args), e)
        return None

    if result.returncode != 0:
        logger.debug("Probe %r exited with %d", list(args), result.returncode)
        return None

    output = (result.stdout or "").strip()
    return output or None


def command_succeeds(args: Sequence[str], timeout: float = DEFAULT_TIMEOUT) -> bool:
    """Return True if the command runs and exits with status 0."""
    try:
        result = subprocess.run(
            list(args),
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (subprocess.SubprocessError, OSError) as e:
        logger.debug("Status probe %r could not run: %s", list(args), e)
        return False
    return result.returncode == 0
