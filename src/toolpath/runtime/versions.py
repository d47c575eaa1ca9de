"""Version-aware ordering of installed-version directory names.

Ordering follows GNU ``sort -V`` (coreutils ``verrevcmp``): names split into
alternating non-digit and digit runs. Digit runs compare numerically. In
non-digit runs letters sort before other characters, ``~`` sorts before
everything including the end of the run. So ``10.0.0`` < ``v9.0.0`` and
``1.0~rc1`` < ``1.0``.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Tuple

_RUN_RE = re.compile(r"(\D*)(\d*)")

# Terminates every non-digit run; also stands in for a missing run
_END = 0

VersionKey = Tuple[Tuple[Tuple[int, ...], int], ...]


def _char_order(char: str) -> int:
    if char == "~":
        return -1
    if char.isascii() and char.isalpha():
        return ord(char)
    return ord(char) + 256


def version_sort_key(name: str) -> VersionKey:
    """Sort key with `sort -V` semantics.

    "v10.2.0" sorts after "v9.0.0"; "1.2" sorts before "1.2.1".
    """
    key = []
    for text, number in _RUN_RE.findall(name):
        if not text and not number:
            continue
        key.append((tuple(_char_order(c) for c in text) + (_END,), int(number or 0)))
    # A name that runs out compares like an empty run followed by 0
    key.append(((_END,), 0))
    return tuple(key)


def latest_version(names: Iterable[str]) -> Optional[str]:
    """Return the highest version name, or None if there are none."""
    candidates = [name.strip() for name in names if name.strip()]
    if not candidates:
        return None
    return max(candidates, key=version_sort_key)
