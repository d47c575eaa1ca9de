"""Host platform classification."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from ..utils.process import DEFAULT_TIMEOUT, command_succeeds
from .types import NativeStrategy, Strategy, SubsystemStrategy, UnsupportedStrategy

logger = logging.getLogger(__name__)

WINDOWS = "win32"
DEFAULT_LAUNCHER = "wsl"

StatusCheck = Callable[[Sequence[str], float], bool]


def is_subsystem_available(
    launcher: str = DEFAULT_LAUNCHER,
    timeout: float = DEFAULT_TIMEOUT,
    status_check: StatusCheck = command_succeeds,
) -> bool:
    """Check whether WSL answers a status query.

    A launcher that is missing, exits non-zero, or hangs past the timeout all
    count as "unavailable". Transient launcher errors are not told apart from
    a missing WSL install.
    """
    available = status_check([launcher, "--status"], timeout)
    logger.debug("%s --status: %s", launcher, "ok" if available else "failed")
    return available


def classify_platform(
    platform_id: str,
    subsystem_available: Callable[[], bool],
    launcher: str = DEFAULT_LAUNCHER,
) -> Strategy:
    """Pick the resolution strategy for a host.

    Args:
        platform_id: Value in the style of ``sys.platform``
        subsystem_available: Called only on Windows hosts
        launcher: WSL launcher command, used as the command prefix

    Returns:
        NativeStrategy, SubsystemStrategy or UnsupportedStrategy
    """
    if platform_id != WINDOWS:
        return NativeStrategy(platform_id=platform_id)

    if subsystem_available():
        return SubsystemStrategy(prefix=(launcher,))

    return UnsupportedStrategy(
        platform_id=platform_id,
        reason=f"`{launcher} --status` failed; WSL is not installed or not reachable",
    )
